from .menu import MenuCommand, RanchMenu, parse_unsigned

__all__ = ["MenuCommand", "RanchMenu", "parse_unsigned"]
