"""Event system for Squares Canvas"""

from .state_store import StateStore, SubscriptionHandle

__all__ = ['StateStore', 'SubscriptionHandle']
