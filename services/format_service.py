"""
Output line builders.

Every synthesized line of the output log is produced here so the
processor and the finalizer never assemble strings themselves.
"""
from models import ErrorCode, OutputAction
from services.clock_service import format_clock


def time_line(time: int) -> str:
    return format_clock(time)


def error_line(time: int, code: ErrorCode) -> str:
    return f"{format_clock(time)} {OutputAction.ERROR.value} {code.value}"


def forced_exit_line(time: int, client: str) -> str:
    return f"{format_clock(time)} {OutputAction.FORCED_EXIT.value} {client}"


def queue_popped_line(time: int, client: str, table: int) -> str:
    return f"{format_clock(time)} {OutputAction.QUEUE_POPPED.value} {client} {table}"


def billing_line(table: int, amount: int, minutes: int) -> str:
    """`TABLE AMOUNT HH:MM` where HH:MM is the total occupied time."""
    return f"{table} {amount} {format_clock(minutes)}"
