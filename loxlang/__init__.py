"""Scanner, expression trees and printer for the Lox scripting language."""

__version__ = "0.1.0"