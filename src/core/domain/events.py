"""
TokenEvent — Модель события token ledger

Каждое успешное изменение состояния фиксируется immutable событием.
Mint — Transfer из ZERO_ADDRESS, burn — Transfer в ZERO_ADDRESS.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Тип события"""

    TRANSFER = "Transfer"
    APPROVAL = "Approval"
    PAUSED = "Paused"
    UNPAUSED = "Unpaused"
    OWNERSHIP_TRANSFERRED = "OwnershipTransferred"
    WITHDRAWAL = "Withdrawal"


class TokenEvent(BaseModel):
    """
    Событие token ledger.

    Поля `source`/`target` трактуются по типу события:
    - Transfer: from → to
    - Approval: owner → spender
    - OwnershipTransferred: previous owner → new owner
    - Withdrawal: vault → recipient
    - Paused/Unpaused: source = account, выполнивший действие
    """

    seq: int = Field(..., ge=0, description="Порядковый номер события")
    event_type: EventType = Field(..., description="Тип события")
    ts_utc_sec: int = Field(..., ge=0, description="Время события (unix, секунды)")

    source: Optional[str] = Field(None, description="Инициатор / отправитель")
    target: Optional[str] = Field(None, description="Получатель")
    amount: int = Field(0, ge=0, description="Сумма (smallest units или wei)")

    model_config = {"frozen": True}
