"""Vehicles: the Liskov Substitution example.

Driving is the only thing every car can do, so `Car` declares only that.
Starting an engine is a separate contract; an electric car simply does not
implement it instead of implementing it with a method that always fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from solid.contracts.conformance import check_conformance, declares
from solid.core.models import ERROR, OK, Result


class Car(ABC):
    @abstractmethod
    @declares(OK)
    def accelerate(self) -> Result:
        ...


class CombustionEngine(ABC):
    @abstractmethod
    @declares(OK, ERROR)
    def turn_on_engine(self) -> Result:
        ...


class Gol(Car, CombustionEngine):
    def turn_on_engine(self) -> Result:
        return Result.success("MotorCar engine started")

    def accelerate(self) -> Result:
        return Result.success("MotorCar is accelerating")


class Byd(Car):
    def accelerate(self) -> Result:
        return Result.success("ElectricCar is accelerating quietly")


def drive_all(cars: Iterable[Car]) -> list[Result]:
    """Accelerate every car; rejects any that cannot stand in for `Car`."""

    fleet = list(cars)
    for car in fleet:
        check_conformance(Car, car)
    return [car.accelerate() for car in fleet]


def start_engines(engines: Iterable[CombustionEngine]) -> list[Result]:
    fleet = list(engines)
    for engine in fleet:
        check_conformance(CombustionEngine, engine)
    return [engine.turn_on_engine() for engine in fleet]
