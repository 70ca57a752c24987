from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from receipt_points.schemas import PointsOut, ReceiptIdOut, ReceiptIn
from receipt_points.scoring import compute_points
from receipt_points.store import ReceiptStore, is_valid_id
import logging, traceback
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_RECEIPT_ITEMS = int(os.getenv("MAX_RECEIPT_ITEMS", "1000"))

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("receipt-points")


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Build the API around one ReceiptStore; a fresh store is created if none is given."""
    app = FastAPI(title="Receipt Points")
    app.state.store = store if store is not None else ReceiptStore()

    @app.exception_handler(RequestValidationError)
    async def invalid_receipt(request: Request, exc: RequestValidationError):
        errors = [{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()]
        logger.info("VALIDATION: %s %s rejected: %d error(s)", request.method, request.url.path, len(errors))
        return JSONResponse(
            status_code=400,
            content={"detail": "The receipt is invalid.", "errors": jsonable_encoder(errors)},
        )

    @app.post("/receipts/process", response_model=ReceiptIdOut)
    def process_receipt(payload: ReceiptIn):
        try:
            if len(payload.items) > MAX_RECEIPT_ITEMS:
                raise HTTPException(status_code=413, detail=f"Too many items (max {MAX_RECEIPT_ITEMS})")

            breakdown = compute_points(payload.to_domain())
            receipt_id = app.state.store.insert(breakdown.total_points)
            logger.info("PROCESS: id=%s retailer=%s points=%d", receipt_id, payload.retailer, breakdown.total_points)
            logger.debug("PROCESS: id=%s breakdown=%s", receipt_id, breakdown)
            return ReceiptIdOut(id=receipt_id)
        except HTTPException:
            raise
        except Exception as e:
            logger.error("Process failed: %s\n%s", e, traceback.format_exc())
            raise HTTPException(status_code=500, detail="Internal error while processing the receipt.")

    @app.get("/receipts/{receipt_id}/points", response_model=PointsOut)
    def get_points(receipt_id: str):
        if not is_valid_id(receipt_id):
            raise HTTPException(status_code=400, detail="The receipt id is invalid.")
        points = app.state.store.lookup(receipt_id)
        logger.info("POINTS: id=%s found=%s", receipt_id, points is not None)
        if points is None:
            raise HTTPException(status_code=404, detail="No receipt found for that ID.")
        return PointsOut(points=points)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
