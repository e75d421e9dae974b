from contextlib import asynccontextmanager
from fastapi import FastAPI
from dotenv import load_dotenv

load_dotenv()

from domain.config import get_schedule_config
from infrastructure.db.database import init_db
from infrastructure.metrics.metrics import metrics_endpoint
from infrastructure.scheduler.daily_sweep import DailySweepScheduler
from app.dependencies import run_scheduled_sweep
from app.routers.v1 import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    schedule = get_schedule_config()
    scheduler = None
    if schedule.enabled:
        scheduler = DailySweepScheduler(run_scheduled_sweep, hour=schedule.hour, minute=schedule.minute)
        scheduler.start()
    app.state.sweep_scheduler = scheduler
    yield
    if scheduler:
        await scheduler.stop()


app = FastAPI(title="sms-gateway", lifespan=lifespan)

@app.get("/metrics")
async def metrics():
    return metrics_endpoint()

@app.get("/health")
async def health():
    return {"status": "ok", "message": "sms-gateway is running"}

app.include_router(router)
