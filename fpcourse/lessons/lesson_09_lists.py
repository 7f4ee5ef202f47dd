"""LESSON 9: Lists — списки из ячеек cons

    [1, 2, 3] == 1 : (2 : (3 : []))

Список либо пуст ([]), либо это голова и хвост (x : xs). Стандартные
операции обходят эту структуру: map, filter, свёртки foldr/foldl, length,
reverse, take/drop, zipWith, (!!), (++). Голова пустого списка не существует:
head [] завершает программу с ошибкой.
"""

import operator

from fpcourse.core.domain import fp_list as L
from fpcourse.core.errors import EmptyListError
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 9
SLUG = "lists"


def run() -> LessonResult:
    out = Transcript()

    xs = L.flist(1, 2, 3, 4, 5)
    out.show("xs", xs)
    out.show("1 : [2,3]", L.cons(1, L.flist(2, 3)))
    out.show("head xs", L.head(xs))
    out.show("tail xs", L.tail(xs))
    out.show("length xs", L.length(xs))
    out.show("map (*2) xs", L.fmap(lambda n: n * 2, xs))
    out.show("filter even xs", L.ffilter(lambda n: n % 2 == 0, xs))
    out.show("foldr (+) 0 xs", L.foldr(operator.add, 0, xs))
    out.show("foldl (-) 0 xs", L.foldl(operator.sub, 0, xs))
    out.show("foldr (-) 0 xs", L.foldr(operator.sub, 0, xs))
    out.show("reverse xs", L.reverse(xs))
    out.show("take 2 xs", L.take(2, xs))
    out.show("drop 2 xs", L.drop(2, xs))
    out.show("zip_with (+) xs [10,20,30]", L.zip_with(operator.add, xs, L.flist(10, 20, 30)))
    out.show("xs !! 3", L.index(xs, 3))
    out.show("xs ++ [6]", L.append(xs, L.flist(6)))

    try:
        L.head(L.NIL)
    except EmptyListError as exc:
        out.say(f"head [] -> {type(exc).__name__}: {exc}")

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
