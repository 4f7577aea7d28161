import pytest

from models import ClientAction, ClubConfig, Event
from services.clock_service import parse_clock


EXAMPLE_INPUT = """3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:54 2 client1 1
10:25 2 client2 2
10:58 1 client3
10:59 2 client3 3
11:30 1 client4
11:35 2 client4 2
11:45 3 client4
12:33 4 client1
12:43 4 client2
15:52 4 client4
"""

EXAMPLE_OUTPUT = [
    "09:00",
    "08:48 1 client1",
    "08:48 13 NotOpenYet",
    "09:41 1 client1",
    "09:48 1 client2",
    "09:52 3 client1",
    "09:52 13 ICanWaitNoLonger",
    "09:54 2 client1 1",
    "10:25 2 client2 2",
    "10:58 1 client3",
    "10:59 2 client3 3",
    "11:30 1 client4",
    "11:35 2 client4 2",
    "11:35 13 PlaceIsBusy",
    "11:45 3 client4",
    "12:33 4 client1",
    "12:33 12 client4 1",
    "12:43 4 client2",
    "15:52 4 client4",
    "19:00 11 client3",
    "19:00",
    "1 70 05:58",
    "2 30 02:18",
    "3 90 08:01",
]


@pytest.fixture
def example_input():
    return EXAMPLE_INPUT


@pytest.fixture
def example_output():
    return list(EXAMPLE_OUTPUT)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_INPUT, encoding="utf-8")
    return path


@pytest.fixture
def make_config():
    def _make(table_count=3, opening="09:00", closing="19:00", hourly_rate=10):
        return ClubConfig(
            table_count=table_count,
            opening=parse_clock(opening),
            closing=parse_clock(closing),
            hourly_rate=hourly_rate,
        )
    return _make


@pytest.fixture
def make_event():
    """make_event("09:41 1 client1") -> Event"""
    def _make(line: str) -> Event:
        parts = line.split(" ")
        action = ClientAction(int(parts[1]))
        table = int(parts[3]) if len(parts) == 4 else None
        return Event(
            time=parse_clock(parts[0]),
            action=action,
            client=parts[2],
            table=table,
            source=line,
        )
    return _make
