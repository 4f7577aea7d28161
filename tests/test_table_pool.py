from core.table_pool import TablePool


def test_occupy_and_release_track_free_count():
    pool = TablePool(3)
    assert pool.free_count() == 3

    pool.occupy(2, "client1", 600)
    assert pool.is_occupied(2)
    assert not pool.is_occupied(1)
    assert pool.free_count() == 2
    assert pool.occupant_of(2) == "client1"

    assert pool.release(2, 645) == 45
    assert not pool.is_occupied(2)
    assert pool.free_count() == 3


def test_release_unknown_table_is_noop():
    pool = TablePool(2)

    assert pool.release(1, 700) == 0
    assert pool.free_count() == 2


def test_reoccupy_overwrites_start_time():
    pool = TablePool(1)
    pool.occupy(1, "a", 540)
    pool.release(1, 600)
    pool.occupy(1, "b", 600)

    assert pool.release(1, 630) == 30
    assert pool.occupied_tables() == []
