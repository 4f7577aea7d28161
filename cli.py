"""
命令列入口：computer-club <input-file>

stdout 只輸出結果行；日誌寫到 stderr。

結束碼：
    0: 成功
    1: 輸入格式錯誤（stdout 印出出錯的那一行）
    2: 檔案無法讀取或超過行數上限
"""
import argparse
import logging
import sys

from config import get_settings
from core.club_manager import ClubManager
from core.exceptions import InputFormatError

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="computer-club",
        description="Replay a day of computer club events and print the event log and billing.",
    )
    parser.add_argument("input_file", help="path to the input file")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    try:
        with open(args.input_file, encoding="utf-8") as f:
            line_count = sum(1 for _ in f)
        if line_count > settings.max_input_lines:
            logger.warning(f"{args.input_file} has {line_count} lines, limit is {settings.max_input_lines}")
            return 2
        output = ClubManager.run_from_file(args.input_file)
    except InputFormatError as e:
        logger.warning(f"Invalid input: {e}")
        print(e.line)
        return 1
    except OSError as e:
        logger.error(f"Cannot read {args.input_file}: {e}")
        return 2

    sys.stdout.write("".join(f"{line}\n" for line in output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
