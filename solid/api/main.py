from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
import uvicorn

from solid.core.models import DeliveryError, UnknownImplementation
from solid.notifications.order_notifier import Order, OrderNotifier, confirmation_message
from solid.notifications.service import create_order_notifier


logger = logging.getLogger(__name__)

app = FastAPI(title="SOLID Examples API")


@lru_cache(maxsize=1)
def get_order_notifier() -> OrderNotifier:
    return create_order_notifier()


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/orders/{order_id}/notifications")
def notify_order(
    order_id: str,
    channel: Optional[str] = None,
    notifier: OrderNotifier = Depends(get_order_notifier),
) -> dict:
    order = Order(id=order_id)
    result = notifier.notify(order, channel)
    if isinstance(result.error, UnknownImplementation):
        raise HTTPException(status_code=404, detail={"kind": result.error.kind, "name": result.error.name})
    if isinstance(result.error, DeliveryError):
        raise HTTPException(status_code=502, detail={"kind": result.error.kind, "reason": result.error.reason})
    return {
        "status": result.status,
        "channel": channel or notifier.registry.default_name,
        "message": confirmation_message(order),
    }


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
