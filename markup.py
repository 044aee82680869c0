from typing import List

from constants import MARKUP_COLORS


SIMPLE_TAGS = {
    '*': 'b',
    '_': 'i',
}
COLOR_MARKER = '!'


def _consume_until(text: str, start: int, marker: str, close_tag: str,
                   parts: List[str]) -> int:
    """
    Дописывает текст от start до следующего marker и закрывающий тэг.

    Если marker больше не встречается, дописывает остаток строки
    без закрывающего тэга. Возвращает позицию, с которой продолжать.
    """

    end = text.find(marker, start)
    if end == -1:
        parts.append(text[start:])
        return len(text)

    parts.append(text[start:end])
    parts.append(close_tag)
    return end + 1


def to_html(text: str) -> str:
    """
    Переводит разметку описания в HTML.

    Поддерживается:
    *жирный* -> <b>, _курсив_ -> <i>, !Nцвет! -> <span style="color:...">.
    Незакрытая конструкция открывается и тянется до конца строки.
    Содержимое между маркерами не разбирается повторно и не экранируется.
    """

    parts: List[str] = []
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if char in SIMPLE_TAGS:
            tag = SIMPLE_TAGS[char]
            parts.append(f"<{tag}>")
            i = _consume_until(text, i + 1, char, f"</{tag}>", parts)

        elif char == COLOR_MARKER and i + 1 < n and text[i + 1].isdecimal():
            color = MARKUP_COLORS.get(text[i + 1], '')
            parts.append(f'<span style="color:{color}">')
            i = _consume_until(text, i + 2, COLOR_MARKER, "</span>", parts)

        else:
            parts.append(char)
            i += 1

    return "".join(parts)
