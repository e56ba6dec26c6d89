"""
Utility functions for the application.
"""
import random
import string
from datetime import datetime


def generate_order_number(prefix='ORD'):
    """
    Generate a unique order number.
    Format: {prefix}YYYYMMDDHHmmss{random 6 digits}
    """
    timestamp = datetime.now().strftime('%Y%m%d%H%M%S')
    random_suffix = ''.join(random.choices(string.digits, k=6))
    return f'{prefix}{timestamp}{random_suffix}'


def pk_of(value):
    """Return the primary key of a model instance, or the value itself."""
    return getattr(value, 'pk', value)
