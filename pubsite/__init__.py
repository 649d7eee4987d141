"""
pubsite

Loads a personal academic website's publication and "specials"
(talks / awards / service) feeds from static JSON, orders and filters
them, and hands explicit view state to the web front-end.

Pipeline (per feed):
- Fetch  = GET the JSON resource, bypassing caches
- Parse  = tolerant record construction (missing fields degrade, never fail)
- Order  = multi-key sort (publications) / numeric year sort (specials)
- View   = immutable view-state record consumed by the templates
"""
__all__ = ["agents", "models", "ordering"]
__version__ = "0.1.0"
