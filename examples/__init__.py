"""Player Identity Examples.

Run each example with:
    python examples/basic_usage.py

Requires:
    - pip install player-identity
"""
