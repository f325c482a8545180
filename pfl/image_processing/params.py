# -*- coding: utf-8 -*-
"""
Filter Parameter Annotations - Declarative constraints via typing.Annotated.

Filters declare their construction-time parameters as ``Annotated`` class
fields carrying ``Range``, ``Options`` and ``Desc`` markers::

    class BrightnessFilter(PixelFilter):
        amount: Annotated[int, Range(min=-255, max=255),
                          Desc('Value added to every channel')] = 0

``ImageProcessor.__init_subclass__`` collects the markers into
``cls.__param_specs__`` (a tuple of ``ParamSpec``). After a filter's
``__init__`` runs, every ``ParamSpec`` is checked against the instance
attribute of the same name, so an out-of-range value fails at construction rather than
half-way through a traversal. Front ends read ``__param_specs__`` to build
their input controls.

Author
------
PFL Contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# PFL internal
from pfl.exceptions import ValidationError


class ParamMeta:
    """Marker base: an ``Annotated`` field carrying one of these is a parameter."""


class Range(ParamMeta):
    """Inclusive numeric bounds. Either side may be ``None`` (unbounded)."""

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
    ) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        return f"Range(min={self.min!r}, max={self.max!r})"


class Options(ParamMeta):
    """Discrete set of allowed values."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable label for a parameter."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


class ParamSpec:
    """Resolved description of one filter parameter.

    Attributes
    ----------
    name : str
        Attribute and constructor keyword name.
    param_type : type
        Declared type. ``int`` values are accepted for ``float`` params.
    default : Any
        Class-level default, or ``None`` when there is none.
    description : str
        Text from ``Desc``, or ``''``.
    min_value, max_value : int, float, or None
        Inclusive bounds from ``Range``.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    __slots__ = (
        'name', 'param_type', 'default', 'description',
        'min_value', 'max_value', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any = None,
        description: str = '',
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None,
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and constraints.

        Raises
        ------
        TypeError
            If *value* has the wrong type. ``bool`` is rejected for
            numeric params.
        ValidationError
            If *value* is outside ``Range`` or not in ``Options``.
        """
        if self.param_type in (int, float):
            allowed = (int, float) if self.param_type is float else (int,)
            if isinstance(value, bool) or not isinstance(value, allowed):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
        elif self.param_type is not object and not isinstance(value, self.param_type):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not one of {self.choices!r}"
            )

    def __repr__(self) -> str:
        return (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"default={self.default!r})"
        )


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build ``ParamSpec`` objects from the ``Annotated`` fields of *cls*.

    Fields are returned parent-first, in declaration order within each
    class. Fields without a ``ParamMeta`` marker are ignored.

    Raises
    ------
    TypeError
        If one field declares both ``Range`` and ``Options``.
    """
    hints = get_type_hints(cls, include_extras=True)

    names: list = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in names:
                names.append(name)

    specs = []
    for name in names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        rng = next((m for m in metas if isinstance(m, Range)), None)
        opts = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        if rng is not None and opts is not None:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=getattr(cls, name, None),
            description=desc.text if desc else '',
            min_value=rng.min if rng else None,
            max_value=rng.max if rng else None,
            choices=opts.choices if opts else None,
        ))
    return tuple(specs)
