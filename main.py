import logging
from functools import lru_cache
from typing import Dict
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import config
from catalog import get_software, load_catalog
from errors import CatalogError, InvalidDataShape, UnknownSoftware
from estimator import estimate
from schemas import DamageRequest, DamageResponse
from software import Software

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_catalog() -> Dict[str, Software]:
    try:
        return load_catalog()
    except CatalogError as e:
        logger.error('Software catalog unavailable: %s', e)
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/softwares")
async def list_softwares(catalog: Dict[str, Software] = Depends(get_catalog)):
    return {name: software.to_description() for name, software in catalog.items()}


@app.post("/damage", response_model=DamageResponse)
async def damage(req: DamageRequest, catalog: Dict[str, Software] = Depends(get_catalog)):
    try:
        software = get_software(catalog, req.software)
    except UnknownSoftware:
        raise HTTPException(status_code=404, detail=f"Unknown software: {req.software}")
    try:
        return estimate(
            software,
            req.instances_number,
            req.meeting_duration,
            bandwidth_bound=req.bandwidth_bound,
            network_bound=req.network_bound,
            participants_number=req.participants_number,
        )
    except InvalidDataShape as e:
        logger.error('Invalid data for %s: %s', req.software, e)
        raise HTTPException(status_code=422, detail=str(e))
