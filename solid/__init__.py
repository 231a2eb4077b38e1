"""SOLID principles, one small package per principle.

- users: Single Responsibility
- payments: Open/Closed
- vehicles: Liskov Substitution
- database: Interface Segregation
- notifications: Dependency Inversion
"""
