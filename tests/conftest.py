import os
import tempfile

# Must be set before db.py is imported by any test module
_TMP = tempfile.mkdtemp(prefix="grading-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'grading.db')}"
os.environ["GRADING_API_KEY"] = "test-key"
os.environ["ADMIN_TOKEN"] = "test-admin"
os.environ.pop("GRADING_LOCALE", None)
os.environ.pop("CONTENT_DIR", None)

import pytest  # noqa: E402

from db import Base, engine  # noqa: E402
import models  # noqa: E402,F401


@pytest.fixture(scope="session", autouse=True)
def _create_tables():
    Base.metadata.create_all(engine)
    yield
    engine.dispose()
