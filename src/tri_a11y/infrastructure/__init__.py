"""Infrastructure layer — concrete implementations of domain ports.

Storage and document adapters live here.  Wiring happens in
``tri_a11y.bootstrap``.
"""
