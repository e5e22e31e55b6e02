import threading
import time

from app.core.store import LoyaltyStore
from app.schemas.customer import Customer, Order, XPRecord


def test_find_or_create_requires_name():
    store = LoyaltyStore()
    customer, created = store.find_or_create("0612345678", None)
    assert customer is None
    assert created is False
    assert store.counts()["customers"] == 0


def test_find_or_create_creates_once():
    store = LoyaltyStore()
    first, created = store.find_or_create("0612345678", "Anna")
    again, created_again = store.find_or_create("0612345678", None)

    assert created is True
    assert created_again is False
    assert again.id == first.id
    assert first.email == ""
    assert store.xp_for(first.id) == XPRecord(xp=0, totalXP=0)
    assert store.counts() == {"customers": 1, "customerXP": 1, "orders": 0}


def test_ids_do_not_collide_within_same_millisecond(monkeypatch):
    monkeypatch.setattr(time, "time", lambda: 1.0)
    store = LoyaltyStore()

    a, _ = store.find_or_create("1", "A")
    b, _ = store.find_or_create("2", "B")

    assert a.id == "1000"
    assert b.id == "1001"


def test_replace_only_touches_given_collections():
    store = LoyaltyStore(customers=[Customer(id="1", name="Anna")])
    store.replace(customer_xp={"1": XPRecord(xp=5, totalXP=5)})

    customers, xp, orders = store.snapshot()
    assert [c.id for c in customers] == ["1"]
    assert xp["1"].totalXP == 5
    assert orders == []


def test_xp_for_unknown_is_zero():
    assert LoyaltyStore().xp_for("nope") == XPRecord()


def test_login_and_sync_do_not_interleave():
    phone = "0600000000"
    store = LoyaltyStore(
        customers=[Customer(id="P1", name="Oud", phone="0611111111")],
        customer_xp={"P1": XPRecord(xp=1, totalXP=1)},
        orders=[Order(customerId="P1")],
    )
    synced_customers = [Customer(id="S1", name="Anna", phone=phone)]
    synced_xp = {"S1": XPRecord(xp=200, totalXP=200)}
    synced_orders = [Order(customerId="S1")]

    start = threading.Barrier(10)
    done = threading.Event()
    mixed: list[tuple] = []

    def login():
        start.wait()
        for _ in range(50):
            store.find_or_create(phone, "Anna")

    def admin_sync():
        start.wait()
        store.replace(customers=synced_customers, customer_xp=synced_xp, orders=synced_orders)

    def reader():
        start.wait()
        while not done.is_set():
            customers, xp, orders = store.snapshot()
            ids = {c.id for c in customers}
            if orders[0].customerId == "S1":
                ok = "S1" in ids and "P1" not in ids and set(xp) == {"S1"}
            else:
                ok = "P1" in ids and "P1" in xp
            if not ok:
                mixed.append((ids, set(xp), orders[0].customerId))

    workers = [threading.Thread(target=login) for _ in range(8)]
    workers.append(threading.Thread(target=admin_sync))
    watcher = threading.Thread(target=reader)
    watcher.start()
    for t in workers:
        t.start()
    for t in workers:
        t.join()
    done.set()
    watcher.join()

    customers, xp, orders = store.snapshot()
    with_phone = [c for c in customers if c.phone == phone]
    assert len(with_phone) == 1
    assert with_phone[0].id == "S1"
    assert set(xp) == {"S1"}
    assert [o.customerId for o in orders] == ["S1"]
    assert mixed == []
