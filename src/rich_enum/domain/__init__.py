"""Domain Layer"""

from rich_enum.domain.enumeration import Enumeration, EnumerationMember, absolute_difference, member

__all__ = ['Enumeration', 'EnumerationMember', 'absolute_difference', 'member']
