from ui.widgets.countdown_ring import CountdownRing

__all__ = ["CountdownRing"]
