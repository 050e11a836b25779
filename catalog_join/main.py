import base64
import hashlib

from fastapi import FastAPI, UploadFile, File, HTTPException
from .join import join_catalogs
from .models import CombinedCsv, HealthResponse, JoinReport, JoinResponse
from .parse import CatalogReadError, decode_text
from . import rules

app = FastAPI(
    title="catalog-join",
    description="Join Chinese and English item catalog exports into one CSV",
    version="0.1.0",
)


async def _read_upload(upload: UploadFile) -> tuple[str, str]:
    if not (upload.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")
    raw = await upload.read()
    try:
        return decode_text(raw)
    except CatalogReadError as e:
        raise HTTPException(status_code=422, detail=f"{upload.filename}: {e}") from e


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/join", response_model=JoinResponse)
async def join(primary: UploadFile = File(...), secondary: UploadFile = File(...)):
    primary_text, primary_encoding = await _read_upload(primary)
    secondary_text, secondary_encoding = await _read_upload(secondary)

    combined, stats = join_catalogs(primary_text, secondary_text)
    data = combined.encode(rules.OUTPUT_ENCODING)

    return JoinResponse(
        combined_csv=CombinedCsv(
            sha256=hashlib.sha256(data).hexdigest(),
            content_b64=base64.b64encode(data).decode("ascii"),
        ),
        report=JoinReport(
            summary=stats,
            primary_encoding=primary_encoding,
            secondary_encoding=secondary_encoding,
        ),
    )
