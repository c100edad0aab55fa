"""Integration tests for ReminderCRUD."""

from datetime import datetime, timedelta, timezone

from workbench.boundary.db.CRUD.reminder_crud import reminder_crud


async def test_get_by_user_id_orders_by_date(test_async_db, test_user, other_user) -> None:
    now = datetime.now(timezone.utc)
    await reminder_crud.create(
        test_async_db, user_id=test_user.id, title="later", reminder_date=now + timedelta(days=2)
    )
    await reminder_crud.create(
        test_async_db, user_id=test_user.id, title="sooner", reminder_date=now + timedelta(days=1)
    )
    await reminder_crud.create(
        test_async_db, user_id=other_user.id, title="theirs", reminder_date=now
    )

    reminders = await reminder_crud.get_by_user_id(test_async_db, test_user.id)

    assert [r.title for r in reminders] == ["sooner", "later"]
    assert all(r.completed is False for r in reminders)


async def test_get_owned_checks_owner(test_async_db, test_user, other_user) -> None:
    reminder = await reminder_crud.create(
        test_async_db,
        user_id=test_user.id,
        title="review",
        reminder_date=datetime.now(timezone.utc),
    )

    assert await reminder_crud.get_owned(test_async_db, reminder.id, test_user.id) is reminder
    assert await reminder_crud.get_owned(test_async_db, reminder.id, other_user.id) is None
