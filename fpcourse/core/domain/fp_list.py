"""
FList — односвязный список из ячеек cons

Урок 9: data List a = Nil | Cons a (List a)

Список либо пуст (NIL), либо состоит из головы и хвоста-списка.
Ячейки неизменяемы, поэтому хвосты безопасно разделяются между списками:
cons(0, xs) не копирует xs.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции обходят список циклом, глубина стека не зависит от длины
2. head/tail/index на пустом списке — EmptyListError
3. Равенство и хеш структурные (поэлементные)
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar

from fpcourse.core.errors import EmptyListError, error

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


# =============================================================================
# TYPES
# =============================================================================


class FList(Generic[T]):
    """Абстрактный тип списка: экземпляры только Cons(head, tail) или NIL."""

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is FList:
            raise TypeError("FList is abstract: use Cons(head, tail) or NIL")
        return super().__new__(cls)

    def __iter__(self) -> Iterator[T]:
        node: FList[T] = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FList):
            return NotImplemented
        a: FList = self
        b: FList = other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return isinstance(a, Nil) and isinstance(b, Nil)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"FList({list(self)!r})"

    def __str__(self) -> str:
        return "[" + ",".join(str(x) for x in self) + "]"


@dataclass(frozen=True, eq=False, repr=False)
class Cons(FList[T]):
    """Непустой список: голова и хвост."""

    head: T
    tail: FList[T]


@dataclass(frozen=True, eq=False, repr=False)
class Nil(FList[Any]):
    """Пустой список. Используйте NIL."""

    pass


NIL: Nil = Nil()


# =============================================================================
# CONSTRUCTION
# =============================================================================


def cons(x: T, xs: FList[T]) -> FList[T]:
    """x : xs"""
    return Cons(x, xs)


def from_iterable(xs: Iterable[T]) -> FList[T]:
    """Построение списка из конечного iterable (с конца к началу)."""
    result: FList[T] = NIL
    for x in reversed(list(xs)):
        result = Cons(x, result)
    return result


def flist(*xs: T) -> FList[T]:
    """flist(1, 2, 3) == [1,2,3]"""
    return from_iterable(xs)


def replicate(n: int, x: T) -> FList[T]:
    result: FList[T] = NIL
    for _ in range(max(n, 0)):
        result = Cons(x, result)
    return result


def to_list(xs: FList[T]) -> List[T]:
    return list(xs)


# =============================================================================
# DECONSTRUCTION
# =============================================================================


def is_empty(xs: FList[T]) -> bool:
    return isinstance(xs, Nil)


def head(xs: FList[T]) -> T:
    """
    Голова списка.

    Raises:
        EmptyListError: для пустого списка
    """
    match xs:
        case Cons(head=h):
            return h
    raise EmptyListError("head")


def tail(xs: FList[T]) -> FList[T]:
    """
    Хвост списка.

    Raises:
        EmptyListError: для пустого списка
    """
    match xs:
        case Cons(tail=t):
            return t
    raise EmptyListError("tail")


def last(xs: FList[T]) -> T:
    if is_empty(xs):
        raise EmptyListError("last")
    result = None
    for x in xs:
        result = x
    return result


def index(xs: FList[T], i: int) -> T:
    """
    Элемент по позиции (xs !! i).

    Raises:
        ProgramError: отрицательный индекс
        EmptyListError: индекс за концом списка
    """
    if i < 0:
        error("Prelude.!!: negative index")
    node = xs
    while isinstance(node, Cons):
        if i == 0:
            return node.head
        node = node.tail
        i -= 1
    raise EmptyListError("!!")


# =============================================================================
# TRAVERSAL
# =============================================================================


def length(xs: FList[T]) -> int:
    return foldl(lambda acc, _: acc + 1, 0, xs)


def foldl(f: Callable[[U, T], U], z: U, xs: FList[T]) -> U:
    """foldl f z [x1, x2, ..., xn] == (...((z `f` x1) `f` x2)...) `f` xn"""
    acc = z
    for x in xs:
        acc = f(acc, x)
    return acc


def foldr(f: Callable[[T, U], U], z: U, xs: FList[T]) -> U:
    """
    foldr f z [x1, x2, ..., xn] == x1 `f` (x2 `f` ... (xn `f` z)...)

    Строгий вариант: обходит список с конца, без рекурсии.
    """
    acc = z
    for x in reversed(list(xs)):
        acc = f(x, acc)
    return acc


def reverse(xs: FList[T]) -> FList[T]:
    return foldl(lambda acc, x: Cons(x, acc), NIL, xs)


def fmap(f: Callable[[T], U], xs: FList[T]) -> FList[U]:
    """map f xs"""
    return from_iterable(f(x) for x in xs)


def ffilter(p: Callable[[T], bool], xs: FList[T]) -> FList[T]:
    """filter p xs"""
    return from_iterable(x for x in xs if p(x))


def take(n: int, xs: FList[T]) -> FList[T]:
    out = []
    node = xs
    while n > 0 and isinstance(node, Cons):
        out.append(node.head)
        node = node.tail
        n -= 1
    return from_iterable(out)


def drop(n: int, xs: FList[T]) -> FList[T]:
    """Хвост после первых n элементов разделяется с исходным списком."""
    node = xs
    while n > 0 and isinstance(node, Cons):
        node = node.tail
        n -= 1
    return node


def append(xs: FList[T], ys: FList[T]) -> FList[T]:
    """xs ++ ys: копируется только xs, ys разделяется."""
    return foldr(Cons, ys, xs)


def concat(xss: Iterable[FList[T]]) -> FList[T]:
    parts = list(xss)
    result: FList[T] = NIL
    for xs in reversed(parts):
        result = append(xs, result)
    return result


def zip_with(f: Callable[[T, U], V], xs: FList[T], ys: FList[U]) -> FList[V]:
    """Результат обрезается по более короткому списку."""
    return from_iterable(f(x, y) for x, y in zip(xs, ys))


def fzip(xs: FList[T], ys: FList[U]) -> FList[tuple]:
    return zip_with(lambda x, y: (x, y), xs, ys)


def elem(x: T, xs: FList[T]) -> bool:
    return any(y == x for y in xs)


def fsum(xs: FList[Any]) -> Any:
    return foldl(lambda acc, x: acc + x, 0, xs)


def product(xs: FList[Any]) -> Any:
    return foldl(lambda acc, x: acc * x, 1, xs)


def maximum(xs: FList[T]) -> T:
    """
    Raises:
        EmptyListError: для пустого списка
    """
    if is_empty(xs):
        raise EmptyListError("maximum")
    return foldl(lambda acc, x: x if x > acc else acc, head(xs), tail(xs))
