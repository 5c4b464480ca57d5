"""Plane shapes with area and perimeter."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

PI = math.pi


class Shape(ABC):
    """A shape with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""


@dataclass(frozen=True)
class Rectangle(Shape):
    """An axis-aligned rectangle."""

    height: float
    width: float

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle(Shape):
    """A circle given by its radius."""

    radius: float

    def area(self) -> float:
        return PI * self.radius * self.radius


@dataclass(frozen=True)
class Triangle(Shape):
    """A triangle given by its base and height."""

    base: float
    height: float

    def area(self) -> float:
        return 0.5 * self.base * self.height