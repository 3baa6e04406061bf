# api.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Union

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, HTTPException, Path
from fastapi.middleware.cors import CORSMiddleware
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from tokensafety.config import clamp_concurrency, get_cors_origins, get_default_concurrency, setup_logging
from tokensafety.core.analyze import analyze_payload
from tokensafety.core.presentation import get_fee_color
from tokensafety.core.protection import get_fee_warning, get_is_fee_related_warning
from tokensafety.core.severity import get_severity_from_token_protection_warning

load_dotenv()
setup_logging()
logger = logging.getLogger("API")

app = FastAPI(title="Token Safety API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api = APIRouter(prefix="/api")


def _alias(camel: str, snake: str):
    # same camelCase/snake_case spellings the payload loader accepts
    return Field(default=None, validation_alias=AliasChoices(camel, snake))


class CurrencyPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    isNative: Optional[bool] = _alias("isNative", "is_native")
    chainId: Optional[Union[int, str]] = _alias("chainId", "chain_id")
    address: Optional[str] = None
    symbol: Optional[str] = None
    name: Optional[str] = None
    decimals: Optional[int] = None
    sellFeeBps: Optional[float] = _alias("sellFeeBps", "sell_fee_bps")
    buyFeeBps: Optional[float] = _alias("buyFeeBps", "buy_fee_bps")


class SafetyInfoPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tokenList: Optional[str] = _alias("tokenList", "token_list")
    protectionResult: Optional[str] = _alias("protectionResult", "protection_result")
    attackType: Optional[str] = _alias("attackType", "attack_type")


class CurrencyInfoPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currency: Optional[CurrencyPayload] = None
    safetyInfo: Optional[SafetyInfoPayload] = _alias("safetyInfo", "safety_info")


class BatchJob(BaseModel):
    items: List[Optional[CurrencyInfoPayload]]
    concurrency: Optional[int] = None


def _classify(payload: Optional[CurrencyInfoPayload]) -> dict:
    return analyze_payload(payload.model_dump() if payload is not None else None)


@api.get("/health")
def health():
    return {"ok": True}


@api.post("/classify")
def classify(payload: CurrencyInfoPayload):
    try:
        out = _classify(payload)
    except ValueError as ve:
        logger.info("/classify rejected -> %s", ve)
        raise HTTPException(status_code=400, detail=str(ve))
    logger.debug("/classify OK symbol=%s warning=%s severity=%s", out["symbol"], out["warning"], out["severity"])
    return out


@api.post("/batch")
def batch(job: BatchJob):
    if not job.items:
        raise HTTPException(status_code=400, detail="items list is empty")

    workers = clamp_concurrency(job.concurrency if job.concurrency is not None else get_default_concurrency())
    logger.info("POST /api/batch -> count=%d conc=%d", len(job.items), workers)

    def work(payload):
        try:
            return _classify(payload)
        except ValueError as e:
            return {"error": str(e)}

    try:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            out = list(ex.map(work, job.items))
    except Exception as e:
        logger.exception("/batch thread pool error")
        raise HTTPException(status_code=500, detail=str(e))

    return {"count": len(out), "results": out}


@api.get("/fee/{fee_percent}")
def fee(fee_percent: float = Path(ge=0, le=100)):
    warning = get_fee_warning(fee_percent)
    return {
        "fee_percent": fee_percent,
        "warning": warning.value,
        "severity": get_severity_from_token_protection_warning(warning).value,
        "is_fee_related": get_is_fee_related_warning(warning),
        "fee_color": get_fee_color(fee_percent).value,
    }


app.include_router(api)
