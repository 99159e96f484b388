# main.py
from fastapi.middleware.cors import CORSMiddleware
import os
from datetime import date
from dotenv import load_dotenv

from fastapi import FastAPI
from api import pregnancy

# Load environment variables
load_dotenv()

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")


def get_cors_origins() -> list:
    """Comma separated CORS_ORIGINS, "*" when unset"""
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


# Initialize FastAPI app
app = FastAPI(
    title="Pregnancy Calendar Backend",
    description="Due date, gestational age, 280 day pregnancy calendar and summary calculations",
    version=APP_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    print("🚀 Starting Pregnancy Calendar Backend...")

    try:
        from services.pregnancy_calculator import get_pregnancy_calculator
        from services.reference_data import FETAL_DEVELOPMENT, APPOINTMENT_SCHEDULE

        get_pregnancy_calculator()
        print(f"✅ Reference data loaded: {len(FETAL_DEVELOPMENT)} development weeks, "
              f"{len(APPOINTMENT_SCHEDULE)} appointments")

        print("🎉 Backend startup complete!")

    except Exception as e:
        print(f"❌ Error during startup: {e}")
        raise

# Include API routers
app.include_router(pregnancy.router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Pregnancy Calendar API",
        "version": APP_VERSION,
        "status": "running",
        "features": ["due_date", "gestational_age", "calendar", "summary", "month_filters", "export"]
    }

# Health check endpoint
@app.get("/health")
async def health_check():
    from services.pregnancy_calculator import get_pregnancy_calculator

    try:
        calculator = get_pregnancy_calculator()
        calendar_size = len(calculator.generate_pregnancy_calendar(date(2000, 1, 1)))

        return {
            "status": "healthy",
            "services": {
                "api": "healthy",
                "calculator": {"status": "healthy", "calendar_days": calendar_size}
            },
            "message": "All services are running"
        }

    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e),
            "message": "Some services are down"
        }

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    host = os.getenv("HOST", "0.0.0.0")
    uvicorn.run("main:app", host=host, port=port)
