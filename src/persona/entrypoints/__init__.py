"""Entrypoints (inbound adapters) for PERSONA.

Expose the domain to the outside world. Parse inputs, call the domain
factories, and present results.

Dependency rule: may import `persona.domain`; the domain must never import
from here.
"""
