"""
Host-facing function registry.

The expression shell calls functions by qualified name ("NAMESPACE.NAME")
with a positional argument list and an execution context. This module
registers the PARSER_STELLAR_TRANSFORM functions under those names.

The context is part of the calling convention only; these functions do
not read it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Type

from sensorcfg.transforms import (
    add_stellar_transformations,
    print_stellar_transformations,
    remove_stellar_transformations,
)

NAMESPACE = "PARSER_STELLAR_TRANSFORM"


class UnknownFunctionError(KeyError):
    """Raised when no function is registered under a name."""
    pass


@dataclass(frozen=True)
class FunctionInfo:
    """Descriptive metadata shown by the host's help command."""
    namespace: str
    name: str
    description: str = ""
    params: List[str] = field(default_factory=list)
    returns: str = ""

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


class StellarFunction(ABC):
    """Base class for functions callable from the expression shell."""

    info: FunctionInfo

    @abstractmethod
    def apply(self, args: Sequence[Any], context: Any = None) -> Any:
        """Evaluate the function for a positional argument list."""

    def initialize(self, context: Any = None) -> None:
        pass

    def is_initialized(self) -> bool:
        return True


class FunctionRegistry:
    """Maps qualified names to function instances."""

    def __init__(self) -> None:
        self._functions: Dict[str, StellarFunction] = {}

    def register(self, function_class: Type[StellarFunction]) -> StellarFunction:
        function = function_class()
        name = function.info.qualified_name
        if name in self._functions:
            raise ValueError(f"Function already registered: {name}")
        self._functions[name] = function
        return function

    def get(self, qualified_name: str) -> StellarFunction:
        try:
            return self._functions[qualified_name]
        except KeyError:
            raise UnknownFunctionError(qualified_name) from None

    def names(self) -> List[str]:
        return sorted(self._functions)

    def call(self, qualified_name: str, args: Sequence[Any], context: Any = None) -> Any:
        function = self.get(qualified_name)
        if not function.is_initialized():
            function.initialize(context)
        return function.apply(args, context)


default_registry = FunctionRegistry()


def stellar_function(
    namespace: str,
    name: str,
    description: str = "",
    params: Optional[List[str]] = None,
    returns: str = "",
    registry: Optional[FunctionRegistry] = None,
):
    """
    Class decorator attaching metadata and registering the function.

    Example:
        @stellar_function(namespace="NS", name="ECHO", params=["x - anything"])
        class Echo(StellarFunction):
            def apply(self, args, context=None):
                return args[0]
    """
    def decorator(cls: Type[StellarFunction]) -> Type[StellarFunction]:
        cls.info = FunctionInfo(
            namespace=namespace,
            name=name,
            description=description,
            params=list(params or []),
            returns=returns,
        )
        (registry or default_registry).register(cls)
        return cls
    return decorator


def _arg(args: Optional[Sequence[Any]], index: int) -> Any:
    """Positional argument, or None when the caller left it off."""
    if args is None or index >= len(args):
        return None
    return args[index]


@stellar_function(
    namespace=NAMESPACE,
    name="PRINT",
    description="Retrieve stellar field transformations.",
    params=["sensorConfig - Sensor config to add transformation to."],
    returns="The String representation of the transformations",
)
class PrintStellarTransformation(StellarFunction):

    def apply(self, args, context=None):
        return print_stellar_transformations(_arg(args, 0))


@stellar_function(
    namespace=NAMESPACE,
    name="REMOVE",
    description="Remove stellar field transformation.",
    params=[
        "sensorConfig - Sensor config to add transformation to.",
        "stellarTransforms - A list of stellar transforms to remove",
    ],
    returns="The String representation of the config in zookeeper",
)
class RemoveStellarTransformation(StellarFunction):

    def apply(self, args, context=None):
        return remove_stellar_transformations(_arg(args, 0), _arg(args, 1))


@stellar_function(
    namespace=NAMESPACE,
    name="ADD",
    description="Add stellar field transformation.",
    params=[
        "sensorConfig - Sensor config to add transformation to.",
        "stellarTransforms - A Map associating fields to stellar expressions",
    ],
    returns="The String representation of the config in zookeeper",
)
class AddStellarTransformation(StellarFunction):

    def apply(self, args, context=None):
        return add_stellar_transformations(_arg(args, 0), _arg(args, 1))
