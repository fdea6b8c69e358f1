"""Routing — method-gated route matching.

Routes carry their declared HTTP methods as a typed field. A
``MethodGate`` wraps whatever matcher the host uses and refuses requests
whose effective method is not on the route's allow-list.
"""
