"""
src/persistent_list/ds/list.py
Estructura de Datos Persistente: Lista Enlazada Genérica (Cons List).
Versión 3.0: Genérica, Total & Stack-Safe.

Dos variantes:
- Nil: lista vacía. Una única instancia compartida (NIL) termina toda lista.
- Cons(value, rest): un elemento más el resto de la lista.

Ninguna operación muta un nodo existente. Todas las operaciones son totales
sobre Nil (salvo el accesor estricto 'head') y todas son ITERATIVAS: no
consumen pila de Python proporcional a la longitud.
"""
import copy
from typing import Optional, Iterator, Iterable, Any, List as PyList, Callable, TypeVar, Generic

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')

# Límite de elementos impresos por __repr__ (seguridad para logs)
REPR_LIMIT = 10


class ConsList(Generic[T]):
    """
    Lista Inmutable Persistente.
    Soporta operaciones funcionales (Map, Filter, Find, Foldl, Foldr) y recursión segura.
    Clase base abstracta: los valores concretos son Nil o Cons.
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is ConsList:
            raise TypeError("ConsList es abstracta: usa ConsList.empty() o ConsList.cons()")
        return super().__new__(cls)

    # --- INMUTABILIDAD ---

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} es inmutable (set '{name}')")

    def __delattr__(self, name: str):
        raise AttributeError(f"{type(self).__name__} es inmutable (del '{name}')")

    # --- CONSTRUCTORES ---

    @staticmethod
    def empty() -> 'ConsList[Any]':
        """La lista vacía canónica."""
        return NIL

    nil = empty

    @staticmethod
    def cons(head: T, tail: 'ConsList[T]') -> 'ConsList[T]':
        """O(1) Prepend. El tail se comparte, no se copia."""
        return Cons(head, tail)

    @staticmethod
    def from_python(items: Iterable[T]) -> 'ConsList[T]':
        """O(N). Construye desde un iterable Python conservando el orden."""
        acc = NIL
        # Iteración inversa para construir O(N) sin recursión
        for item in reversed(list(items)):
            acc = Cons(item, acc)
        return acc

    def prepend(self, x: T) -> 'ConsList[T]':
        """
        Añade 'x' como nueva cabeza. La lista actual pasa a ser el resto.
        ConsList.empty().prepend(9).prepend(15) -> List[15, 9]
        """
        return Cons(x, self)

    # --- INSPECCIÓN ---

    def length(self) -> int:
        """O(N) Iterativo. Safe for 1M+ items."""
        count = 0
        curr = self
        while not curr.is_empty:
            count += 1
            curr = curr.tail
        return count

    def first(self) -> Optional[T]:
        """Cabeza de la lista, o None si está vacía."""
        if self.is_empty: return None
        return self.head

    def last(self) -> Optional[T]:
        """Elemento adyacente a Nil, o None si está vacía."""
        if self.is_empty: return None
        curr = self
        while not curr.tail.is_empty:
            curr = curr.tail
        return curr.head

    # --- FUNCTIONAL API (High Order Functions) ---

    def init(self) -> 'ConsList[T]':
        """
        Retorna una NUEVA lista sin el último elemento.
        init(Nil) = Nil, init([x]) = Nil.
        """
        if self.is_empty: return self

        temp_items = []
        curr = self
        while not curr.tail.is_empty:
            temp_items.append(curr.head)
            curr = curr.tail
        return ConsList.from_python(temp_items)

    def map(self, fn: Callable[[T], U]) -> 'ConsList[U]':
        """
        Aplica fn(x) a cada elemento y retorna una NUEVA lista persistente.
        fn se invoca exactamente una vez por elemento, de cabeza a cola.
        """
        if self.is_empty: return self

        # 1. Recolectar resultados en lista Python temporal
        temp_items = []
        curr = self
        while not curr.is_empty:
            temp_items.append(fn(curr.head))
            curr = curr.tail

        # 2. Reconstruir ConsList
        return ConsList.from_python(temp_items)

    def filter(self, predicate: Callable[[T], bool]) -> 'ConsList[T]':
        """Retorna nueva lista solo con elementos que cumplan predicate(x)."""
        if self.is_empty: return self

        temp_items = []
        curr = self
        while not curr.is_empty:
            head = curr.head
            if predicate(head):
                temp_items.append(head)
            curr = curr.tail

        return ConsList.from_python(temp_items)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Primer elemento que cumple predicate(x), o None. Corta en el primer acierto."""
        curr = self
        while not curr.is_empty:
            head = curr.head
            if predicate(head):
                return head
            curr = curr.tail
        return None

    def foldl(self, initial: A, fn: Callable[[A, T], A]) -> A:
        """
        Left Fold: fn(fn(fn(z, e1), e2), e3).
        Retorna 'initial' intacto si la lista está vacía.
        """
        acc = initial
        curr = self
        while not curr.is_empty:
            acc = fn(acc, curr.head)
            curr = curr.tail
        return acc

    def foldr(self, initial: A, fn: Callable[[A, T], A]) -> A:
        """
        Right Fold: foldr([x, *xs]) = fn(foldr(xs), x).
        Para [a, b, c]: fn(fn(fn(z, c), b), a). El acumulado va PRIMERO.
        """
        # Se recorre la lista una vez y se combina desde la cola hacia la cabeza
        acc = initial
        for item in reversed(self.to_python()):
            acc = fn(acc, item)
        return acc

    def to_python(self) -> PyList[T]:
        """O(N). Elementos en orden cabeza-cola."""
        return list(self)

    # --- PYTHON MAGIC METHODS ---

    def __iter__(self) -> Iterator[T]:
        """Iterador seguro O(N)."""
        curr = self
        while not curr.is_empty:
            yield curr.head
            curr = curr.tail

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        """O(1): no recorre la lista."""
        return not self.is_empty

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self.is_empty: return "Nil"

        items = []
        count = 0

        curr = self
        while not curr.is_empty and count < REPR_LIMIT:
            items.append(repr(curr.head))
            curr = curr.tail
            count += 1

        if not curr.is_empty:
            items.append("...")

        return f"List[{', '.join(items)}]"

    def __eq__(self, other):
        """Igualdad estructural: misma longitud y elementos iguales en orden."""
        if not isinstance(other, ConsList): return NotImplemented

        a, b = self, other
        while not a.is_empty and not b.is_empty:
            # Sufijo compartido: el resto es idéntico
            if a is b: return True
            if a.head != b.head: return False
            a, b = a.tail, b.tail
        return a.is_empty and b.is_empty

    def __hash__(self):
        """Consistente con __eq__. Requiere elementos hashables."""
        return hash(tuple(self))

    def __copy__(self):
        # Inmutable: la copia superficial es la propia lista
        return self

    def __deepcopy__(self, memo):
        if self.is_empty: return self
        result = ConsList.from_python([copy.deepcopy(item, memo) for item in self])
        memo[id(self)] = result
        return result


class Nil(ConsList[T]):
    """Variante vacía. Singleton: Nil() is NIL."""
    __slots__ = ()

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def head(self) -> T:
        raise IndexError("Head of empty list")

    @property
    def tail(self) -> 'ConsList[T]':
        """La cola de Nil es Nil (no es un error)."""
        return self


class Cons(ConsList[T]):
    """Variante no vacía: un valor y el resto de la lista."""
    __slots__ = ('value', 'rest')

    def __init__(self, value: T, rest: ConsList[T]):
        # Validación: rest debe ser una lista (garantiza cadena finita terminada en Nil)
        if not isinstance(rest, ConsList):
            raise TypeError(f"Tail must be ConsList, got {type(rest)}")
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'rest', rest)

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def head(self) -> T:
        return self.value

    @property
    def tail(self) -> ConsList[T]:
        """El resto original, compartido (sin copia)."""
        return self.rest


NIL: ConsList[Any] = Nil()
