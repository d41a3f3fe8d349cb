"""Text processing over period-terminated sentences."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

_WORD_PATTERN = re.compile(r"[^ ,.]+")
_FIRST_WORD = re.compile(r"[^ .,]+")
_DIGITS = frozenset("0123456789")

_REFERENCE_YEAR = 2010
_DAYS_IN_YEAR = 365

_MENU = (
    "Вы можете выбрать одно из следующих действий:\n"
    "1) Найти в предложениях все даты записанные в виде “<год> <месяц> <day>” "
    "(“1886 Jun 03”) и заменить их на строку показывающую сколько осталось "
    "часов до конца года.\n"
    "2) Вывести все строки выделив слова на четных позициях красным цветом, "
    "а на нечетных зеленым.\n"
    "3) Удалить все предложения, которые начинаются и заканчиваются на одно "
    "и то же слово.\n"
    "4) Отсортировать предложения по увеличению сумме кодов символов первого "
    "слова в предложении.\n"
    "5) Выход их программы"
)


def read_sentences(text: str) -> list[str]:
    """Split the first line of text into sentences, each ending with a period.

    Spaces following a period are dropped; text after the last period is ignored.
    """
    line = text.split("\n", 1)[0]
    parts = line.split(".")[:-1]
    return [
        (part if index == 0 else part.lstrip(" ")) + "."
        for index, part in enumerate(parts)
    ]


def remove_duplicates(sentences: Iterable[str]) -> list[str]:
    """Drop repeated sentences, keeping the first occurrence of each."""
    return list(dict.fromkeys(sentences))


def hours_to_year_end(month: int, day: int) -> int:
    """Hours left until the end of a non-leap year from the given month and day.

    Out-of-range days roll over into neighbouring months, as calendar
    normalisation does.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12: {month}")
    moment = date(_REFERENCE_YEAR, month, 1) + timedelta(days=day - 1)
    day_of_year = moment.timetuple().tm_yday - 1
    return (_DAYS_IN_YEAR - day_of_year) * 24


def _is_number(text: str) -> bool:
    return all(char in _DIGITS for char in text)


def _find_date(sentence: str) -> Optional[tuple[int, int, int, int]]:
    """Locate the first "<year> <Mon> <day>" date: (start, end, month, day)."""
    state = 0
    start = 0
    month = 0
    for match in _WORD_PATTERN.finditer(sentence):
        word = match.group()
        if state == 2:
            if _is_number(word):
                return start, match.end(), month, int(word)
            state = 0
        if state == 1:
            if word in MONTHS:
                month = MONTHS.index(word) + 1
                state = 2
            else:
                state = 0
        if state == 0:
            start = match.start()
            state = 1 if _is_number(word) else 0
    return None


def _replace_date(sentence: str) -> str:
    found = _find_date(sentence)
    if found is None:
        return sentence
    start, end, month, day = found
    return sentence[:start] + str(hours_to_year_end(month, day)) + sentence[end:]


def replace_dates(sentences: Iterable[str]) -> list[str]:
    """Replace the first date in each sentence with the hours left in its year."""
    return [_replace_date(sentence) for sentence in sentences]


def _mark(sentence: str) -> str:
    pieces = []
    green = True
    in_word = False
    for char in sentence:
        if char.isalnum():
            in_word = True
            colour = GREEN if green else RED
            pieces.append(f"{colour}{char}{RESET}")
        else:
            if in_word:
                green = not green
                in_word = False
            pieces.append(char)
    return "".join(pieces)


def mark_words(sentences: Iterable[str]) -> list[str]:
    """Colour words at odd positions green and at even positions red."""
    return [_mark(sentence) for sentence in sentences]


def _first_word(sentence: str) -> Optional[str]:
    match = _FIRST_WORD.search(sentence)
    return match.group() if match else None


def _same_ends(sentence: str) -> bool:
    first = _first_word(sentence)
    if first is None:
        return False
    start = len(sentence) - len(first) - 1
    if start < 0:
        return False
    if start != 0 and sentence[start - 1].isalpha():
        return False
    return sentence[start:start + len(first)] == first


def remove_same_ends(sentences: Iterable[str]) -> list[str]:
    """Drop sentences that begin and end with the same word."""
    return [sentence for sentence in sentences if not _same_ends(sentence)]


def first_word_code_sum(sentence: str) -> int:
    """Sum of the character codes of the sentence's first word."""
    return sum(map(ord, _first_word(sentence) or ""))


def sort_by_first_word(sentences: Iterable[str]) -> list[str]:
    """Order sentences by the code sum of their first word, ascending."""
    return sorted(sentences, key=first_word_code_sum)


def _read_variant() -> Optional[int]:
    for line in sys.stdin:
        if not line.strip():
            continue
        match = re.match(r"\s*([+-]?\d+)", line)
        return int(match.group(1)) if match else None
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read sentences and a menu choice from standard input and act on them."""
    parser = argparse.ArgumentParser(
        prog="sentences", description="Process period-terminated sentences."
    )
    parser.parse_args(argv)

    print("Введите предложения. Для конца ввода нажмите ENTER.")
    sentences = remove_duplicates(read_sentences(sys.stdin.readline()))

    print(_MENU)
    print("Введите вариант действия: ", end="")
    variant = _read_variant()

    if variant == 1:
        print("Выбрано действие 1.")
        output = replace_dates(sentences)
    elif variant == 2:
        print("Выбрано действие 2.")
        output = mark_words(sentences)
    elif variant == 3:
        print("Выбрано действие 3.")
        output = remove_same_ends(sentences)
    elif variant == 4:
        print("Выбрано действие 4.")
        output = sort_by_first_word(sentences)
    elif variant == 5:
        print("Выбрано действие 5.")
        print("Всего хорошего:)", end="")
        return 0
    else:
        print("Введенные данные не корректны! Попробуйте еще раз!")
        return 0

    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())