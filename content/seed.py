"""Default rows inserted into a fresh store."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from content.models import Holiday, Quote, Setting

DEFAULT_HOLIDAYS = [
    {"date": "2025-04-30", "name": "Ngày Giải phóng miền Nam"},
    {"date": "2025-05-01", "name": "Ngày Quốc tế Lao động"},
]

DEFAULT_QUOTES = [
    {"text": "Không có gì quý hơn độc lập, tự do", "author": "Hồ Chí Minh"},
    {
        "text": "Đoàn kết, đoàn kết, đại đoàn kết. Thành công, thành công, đại thành công",
        "author": "Hồ Chí Minh",
    },
    {"text": "Dân ta phải biết sử ta. Cho tường gốc tích nước nhà Việt Nam", "author": "Hồ Chí Minh"},
]

DEFAULT_SETTINGS = {
    "countdown_date": "2025-04-30T00:00:00+07:00",
    "popup_enabled": "true",
    "popup_delay": "5",
    "popup_content": "<h3>Chào mừng ngày lễ 30/4!</h3>",
    "meta_title": "Lịch Nghỉ Lễ 30/4 - 01/5",
    "meta_description": "Theo dõi lịch nghỉ lễ và tour du lịch",
}


async def seed_defaults(session: AsyncSession) -> int:
    """Insert default holidays, quotes and settings that are not already present.

    Holidays and settings are ignored on conflict with their unique column.
    Quotes have no unique column, so a default quote is skipped when the same
    (text, author) pair already exists. Returns the number of quotes added.
    """
    await session.execute(
        sqlite_insert(Holiday).values(DEFAULT_HOLIDAYS).on_conflict_do_nothing(index_elements=[Holiday.date])
    )
    await session.execute(
        sqlite_insert(Setting)
        .values([{"key": k, "value": v} for k, v in DEFAULT_SETTINGS.items()])
        .on_conflict_do_nothing(index_elements=[Setting.key])
    )

    result = await session.execute(select(Quote.text, Quote.author))
    existing = {(row.text, row.author) for row in result}
    missing = [q for q in DEFAULT_QUOTES if (q["text"], q["author"]) not in existing]
    for q in missing:
        session.add(Quote(text=q["text"], author=q["author"]))
    await session.commit()
    return len(missing)
