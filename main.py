import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.admin import router as admin_router
from routers.attempts import router as attempts_router
from routers.exercises import router as exercises_router
from routers.health import router as health_router
from routers.quizzes import router as quizzes_router

logger = logging.getLogger("practice-grading")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Practice Grading API")

# Allow calls from the web client in dev and production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(exercises_router)  # /exercises/...
app.include_router(quizzes_router)  # /quizzes/...
app.include_router(attempts_router)  # /exercise-attempts, /quiz-attempts
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
