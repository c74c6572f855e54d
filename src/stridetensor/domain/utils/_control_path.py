"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to one
of several registered implementations based on an object's runtime state.

Core idea
---------
- You define a *base* method on a class (its signature and docstring become
  the canonical ones).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the configured state attribute from ``self``
  and dispatches to the implementation registered for that value.

In StrideTensor the state is the element kind of a tensor (integer vs.
floating), which selects e.g. truncating vs. true division, or discrete vs.
continuous random sampling.

Notes
-----
- The first registration replaces the class attribute with a dispatching
  wrapper. Later registrations for the same method update the same registry.
- Registered implementations receive ``self`` as their first argument, like
  ordinary instance methods.
- Registries are closure-local: different builders never share entries.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")


def create_path_builder(state_attr: str = "_state") -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Union[Exception, Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" used to register stateful control paths.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("kind")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, state="A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, state="B")
        def foo_B(self, x: int) -> int:
            ...

    When `obj.foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on `obj.kind`.

    Parameters
    ----------
    state_attr : str, optional
        Name of the attribute (usually a property) read from ``self`` to
        select a control path. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    _missing = object()

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Exception, Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
        method : Callable[P, R]
            The base method being templated. Its metadata is copied onto the
            installed wrapper via `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : optional
            Controls what happens when no control path matches:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception class, the wrapper raises `trap_exception()`.
            - If another callable, it is invoked as
              `trap_exception(method, state)` before raising
              `trap_exception()`.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator that registers `sub_method` and installs the dispatcher.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {repr(state)}"
            )

        # Unwrap an already-installed dispatcher so every registration keys on
        # the original method name.
        base = getattr(method, "__wrapped__", method)
        smk = MethodKey(cls.__name__, base.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(base)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                cur_state = getattr(self, state_attr, _missing)
                if cur_state is _missing:
                    raise NotImplementedError(
                        "{} is missing attribute {} (@property)".format(
                            type(self), repr(state_attr)
                        )
                    )
                key = MethodKey(cls.__name__, base.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if not trap_exception:
                    raise NotImplementedError(
                        "Missing control path ({}={}) for {}".format(
                            state_attr, repr(cur_state), repr(base.__qualname__)
                        )
                    )
                if callable(trap_exception) and not (
                    isinstance(trap_exception, type)
                    and issubclass(trap_exception, BaseException)
                ):
                    trap_exception(base, cur_state)
                raise trap_exception()

            setattr(cls, base.__name__, wrapper)
            return sub_method

        return decorator

    return templator
