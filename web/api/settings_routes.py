"""Site settings API: countdown date, popup and meta tags as a flat key/value map."""
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from content.store import ContentStore
from web.api.utils import get_store

router = APIRouter(prefix="/api/settings", tags=["settings"])


class SettingUpdate(BaseModel):
    key: Any = None
    value: Any = None


@router.get("")
async def get_settings(store: ContentStore = Depends(get_store)):
    """All settings as {key: value}."""
    return await store.list_settings()


@router.post("")
async def update_setting(body: Optional[SettingUpdate] = None, store: ContentStore = Depends(get_store)):
    """Create or replace one setting by key."""
    body = body or SettingUpdate()
    await store.set_setting(body.key, body.value)
    return {"success": True}
