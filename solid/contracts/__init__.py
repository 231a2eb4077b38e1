"""Contracts package.

A contract is an abstract class whose abstract methods are its operations.
Implementations are checked against their contract when they are composed
(registered, driven, injected), never when they are first called.
"""
