"""In-memory specification model for provider code generation: types, defaults, validators and plan modifiers."""

__version__ = "0.1.0"

__all__ = ["defaults", "plan_modifiers", "types", "validators"]