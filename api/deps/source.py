from __future__ import annotations

from fastapi import Depends

from api.deps.settings import Settings, get_settings
from sources import TradeSource, build_source


def get_trade_source(settings: Settings = Depends(get_settings)) -> TradeSource:
    """Source for the current request. Tests override this dependency."""
    return build_source(settings)
