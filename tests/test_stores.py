import threading

import pytest

from breakway_api.app.core.db import Database, init_db
from breakway_api.app.core.errors import NotFound
from breakway_api.app.core.stores import (
    ORDER_CANCELLED,
    SENDER_AGENT,
    SENDER_CUSTOMER,
    OrderRecord,
    SupportTicketRecord,
    TicketMessage,
    UserRecord,
    generate_id,
)


def _user(user_id="U-1", email="a@x.com", mobile=None):
    return UserRecord(id=user_id, name="Alice", password="p1", email=email, mobile=mobile)


def test_find_by_contact_matches_email_or_mobile():
    db = Database()
    db.users.insert(_user("U-1", email="a@x.com"))
    db.users.insert(_user("U-2", email=None, mobile="0700000000"))

    assert db.users.find_by_contact("a@x.com").id == "U-1"
    assert db.users.find_by_contact("0700000000").id == "U-2"
    assert db.users.find_by_contact("0700000000", "email") is None
    assert db.users.find_by_contact("0700000000", "mobile").id == "U-2"
    assert db.users.find_by_contact(None) is None
    assert db.users.find_by_contact("") is None


def test_store_returns_copies():
    db = Database()
    db.users.insert(_user())
    fetched = db.users.find_by_id("U-1")
    fetched.is_admin = True

    assert db.users.find_by_id("U-1").is_admin is False


def test_update_user_overwrites_fields():
    db = Database()
    db.users.insert(_user())
    updated = db.users.update("U-1", name="Bob", address=None)

    assert updated.name == "Bob"
    assert updated.address is None
    assert db.users.find_by_id("U-1").name == "Bob"


def test_update_missing_user_raises_not_found():
    db = Database()
    with pytest.raises(NotFound):
        db.users.update("U-missing", name="Bob")


def test_user_id_is_immutable():
    db = Database()
    db.users.insert(_user())
    with pytest.raises(ValueError):
        db.users.update("U-1", id="U-2")


def test_list_by_user_preserves_insertion_order_and_is_single_pass():
    db = Database()
    for n in range(3):
        db.orders.insert(OrderRecord(id=f"ORD-{n}", user_id="U-1"))
    db.orders.insert(OrderRecord(id="ORD-other", user_id="U-2"))

    orders = db.orders.list_by_user("U-1")
    assert [o.id for o in orders] == ["ORD-0", "ORD-1", "ORD-2"]
    assert list(orders) == []


def test_update_status():
    db = Database()
    db.orders.insert(OrderRecord(id="ORD-1", user_id="U-1"))
    assert db.orders.update_status("ORD-1", ORDER_CANCELLED).status == ORDER_CANCELLED
    with pytest.raises(NotFound):
        db.orders.update_status("ORD-2", ORDER_CANCELLED)


def test_ticket_thread_is_append_only():
    db = Database()
    first = TicketMessage(sender=SENDER_CUSTOMER, text="No gas", at="2024-01-01T00:00:00.000Z")
    db.tickets.insert(
        SupportTicketRecord(
            id="T-1",
            user_id="U-1",
            name="Alice",
            message="No gas",
            created_at=first.at,
            thread=[first],
        )
    )
    reply = TicketMessage(sender=SENDER_AGENT, text="On our way", at="2024-01-01T00:05:00.000Z")
    ticket = db.tickets.append_message("T-1", reply)

    assert [m.sender for m in ticket.thread] == [SENDER_CUSTOMER, SENDER_AGENT]
    assert ticket.thread[0] == first
    assert db.tickets.update_status("T-1", "resolved").status == "resolved"
    assert len(db.tickets.find_by_id("T-1").thread) == 2


def test_transaction_blocks_other_threads():
    db = Database()
    seen = []

    def writer():
        db.users.insert(_user("U-2", email="b@x.com"))
        seen.append(db.users.count())

    with db.transaction():
        worker = threading.Thread(target=writer)
        worker.start()
        worker.join(timeout=0.2)
        # The writer is still waiting for the lock.
        assert worker.is_alive()
        assert db.users.count() == 0
    worker.join()
    assert seen == [1]


def test_generate_id_is_unique_and_prefixed():
    ids = {generate_id("ORD") for _ in range(100)}
    assert len(ids) == 100
    assert all(i.startswith("ORD-") for i in ids)


def test_init_db_seeds_admin():
    db = init_db(seed_admin=True)
    admins = [u for u in db.users.list_all() if u.is_admin]
    assert len(admins) == 1

    assert init_db(seed_admin=False).users.count() == 0
