"""Parameterized SQL assembly from resolved contract identifiers."""
