import threading

import pytest

from server_components.card_utils.card import Card
from server_components.errors import InvalidCard, NotASequence, NotFound, NotFoundError, ValidationError


def names(store, username):
    return [card["name"] for card in store.get(username)]


def test_get_unknown_user_is_empty(collections):
    assert collections.get("nobody") == []


def test_append_keeps_order_across_calls(collections):
    collections.create("alice")
    assert collections.append("alice", [{"name": "Bolt"}, {"name": "Shock"}]) == 2
    assert collections.append("alice", []) == 0
    assert collections.append("alice", ({"name": "Opt"},)) == 1
    assert names(collections, "alice") == ["Bolt", "Shock", "Opt"]


def test_append_creates_missing_collection(collections):
    collections.append("bob", [{"name": "Bolt"}])
    assert "bob" in collections
    assert names(collections, "bob") == ["Bolt"]


def test_cards_round_trip_their_fields(collections):
    card = {"name": "Frodo Baggins", "type": "Legendary Creature", "rarity": "rare",
            "setName": "Lord of the Rings", "image": "https://img/1.png", "price": "1.25"}
    collections.append("alice", [card])

    stored = collections.get("alice")[0]
    assert stored.pop("id") == 1
    assert stored == card


@pytest.mark.parametrize("payload", ["Bolt", {"name": "Bolt"}, None, 3])
def test_append_rejects_non_sequences(collections, payload):
    with pytest.raises(NotASequence):
        collections.append("alice", payload)
    assert collections.get("alice") == []


def test_one_bad_card_rejects_the_whole_batch(collections):
    collections.append("alice", [{"name": "Bolt"}])
    with pytest.raises(ValidationError) as exc:
        collections.append("alice", [{"name": "Shock"}, {"type": "Instant"}])
    assert isinstance(exc.value, InvalidCard)
    assert names(collections, "alice") == ["Bolt"]


def test_delete_at_removes_exactly_one_and_keeps_order(collections):
    collections.append("alice", [{"name": n} for n in ("A", "B", "C", "D")])
    removed = collections.delete_at("alice", 1)

    assert removed["name"] == "B"
    assert names(collections, "alice") == ["A", "C", "D"]


@pytest.mark.parametrize("position", [-1, 2, 99, "0", 1.0, True, None])
def test_delete_at_bad_position_leaves_collection(collections, position):
    collections.append("alice", [{"name": "A"}, {"name": "B"}])
    with pytest.raises(NotFoundError):
        collections.delete_at("alice", position)
    assert names(collections, "alice") == ["A", "B"]


def test_delete_at_without_collection(collections):
    with pytest.raises(NotFound):
        collections.delete_at("ghost", 0)


def test_ids_are_stable_and_never_reused(collections):
    collections.append("alice", [{"name": "A"}, {"name": "B"}, {"name": "C"}])
    collections.delete_by_id("alice", 3)
    collections.append("alice", [{"name": "D"}])

    assert [(c["id"], c["name"]) for c in collections.get("alice")] == [(1, "A"), (2, "B"), (4, "D")]


def test_delete_by_id_ignores_position_shifts(collections):
    collections.append("alice", [{"name": "A"}, {"name": "B"}, {"name": "C"}])
    target = collections.get("alice")[2]["id"]
    collections.delete_at("alice", 0)

    collections.delete_by_id("alice", target)
    assert names(collections, "alice") == ["B"]


def test_delete_by_unknown_id(collections):
    collections.append("alice", [{"name": "A"}])
    with pytest.raises(NotFound):
        collections.delete_by_id("alice", 42)
    with pytest.raises(NotFound):
        collections.delete_by_id("bob", 1)


def test_get_returns_copies(collections):
    collections.append("alice", [{"name": "A"}])
    listed = collections.get("alice")
    listed[0]["name"] = "changed"
    listed.append({"name": "extra"})
    assert names(collections, "alice") == ["A"]


def test_card_from_payload_validation():
    assert Card.from_payload({"name": "Bolt"}).to_dict() == {"name": "Bolt"}
    for bad in ({}, {"name": ""}, {"name": "   "}, {"name": 5}, "Bolt", None):
        with pytest.raises(InvalidCard):
            Card.from_payload(bad)


def test_client_supplied_id_is_ignored(collections):
    collections.append("alice", [{"name": "A", "id": 999}])
    assert collections.get("alice") == [{"name": "A", "id": 1}]


def test_concurrent_appends_lose_nothing(collections):
    collections.create("alice")
    workers, per_worker = 8, 50
    barrier = threading.Barrier(workers)

    def add(worker):
        barrier.wait()
        for i in range(per_worker):
            collections.append("alice", [{"name": f"w{worker}-{i}"}])

    threads = [threading.Thread(target=add, args=(w,)) for w in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    cards = collections.get("alice")
    assert len(cards) == workers * per_worker
    assert len({c["id"] for c in cards}) == workers * per_worker
    # each worker's own cards stay in the order it added them
    for w in range(workers):
        mine = [c["name"] for c in cards if c["name"].startswith(f"w{w}-")]
        assert mine == [f"w{w}-{i}" for i in range(per_worker)]


def test_concurrent_deletes_remove_distinct_cards(collections):
    collections.append("alice", [{"name": str(i)} for i in range(100)])
    barrier = threading.Barrier(10)

    def remove():
        barrier.wait()
        for _ in range(5):
            collections.delete_at("alice", 0)

    threads = [threading.Thread(target=remove) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert names(collections, "alice") == [str(i) for i in range(50, 100)]
