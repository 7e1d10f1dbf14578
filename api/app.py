import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from lanchester import UNIT_PRESETS, compare_models, get_preset, run_simulation
from .config import settings
from .schemas import SimulateRequest, SimulationResponse

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

# Enable CORS for development (the chart UI runs on a different port)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": settings.app_name,
        "docs": "/docs",
        "version": "1.0"
    }

@app.get("/presets")
async def list_presets():
    """List stock unit profiles."""
    return {pid: u.to_dict() for pid, u in UNIT_PRESETS.items()}

@app.get("/presets/{preset_id}")
async def read_preset(preset_id: str):
    """Get one stock unit profile."""
    try:
        return get_preset(preset_id).to_dict()
    except KeyError:
        raise HTTPException(404, f"Unknown preset: {preset_id}")

@app.post("/simulate", response_model=SimulationResponse)
def simulate(req: SimulateRequest):
    """Run both attrition models on the submitted forces."""
    unit_a = req.unit_a.to_unit()
    unit_b = req.unit_b.to_unit()
    max_time = req.max_time if req.max_time is not None else settings.default_max_time
    max_rounds = req.max_rounds if req.max_rounds is not None else settings.default_max_rounds

    result = run_simulation(unit_a, unit_b, req.law, max_time=max_time, max_rounds=max_rounds)
    logger.info("Simulated %d %s vs %d %s (%s): winner=%s t=%s rounds=%d",
                unit_a.count, unit_a.name, unit_b.count, unit_b.name, req.law.value,
                result.winner, result.duration, result.discrete_duration)

    return SimulationResponse(
        **result.to_dict(),
        comparison=[asdict(row) for row in compare_models(result)],
    )
