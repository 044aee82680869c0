from typing import List, Optional, Tuple


MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"


def _lower_with_offsets(text: str) -> Tuple[str, List[int]]:
    """
    Переводит текст в нижний регистр посимвольно.

    Возвращает строку и для каждого её символа индекс исходного символа.
    lower() может дать больше одного символа (İ -> i̇), поэтому
    позиции в строках не совпадают напрямую.
    """

    lowered = []
    offsets = []

    for index, char in enumerate(text):
        for lower_char in char.lower():
            lowered.append(lower_char)
            offsets.append(index)

    return "".join(lowered), offsets


def highlight(text: str, term: Optional[str]) -> str:
    """
    Оборачивает вхождения term в <mark>, без учёта регистра.

    Сравнение идёт через lower(), как и в поиске групп.
    Вхождения ищутся слева направо без перекрытий,
    внутрь <mark> попадает исходный фрагмент текста.
    Пустой term оставляет текст без изменений.
    """

    if not term:
        return text

    needle = term.lower()
    haystack, offsets = _lower_with_offsets(text)

    parts: List[str] = []
    last = 0
    pos = haystack.find(needle)

    while pos != -1:
        end = pos + len(needle)
        start = max(offsets[pos], last)
        stop = offsets[end - 1] + 1

        # совпадение внутри уже размеченного символа пропускается
        if stop > start:
            parts.append(text[last:start])
            parts.append(f"{MARK_OPEN}{text[start:stop]}{MARK_CLOSE}")
            last = stop

        pos = haystack.find(needle, end)

    parts.append(text[last:])
    return "".join(parts)
