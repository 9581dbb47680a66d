"""Streamtape link refresher: keeps hosted videos alive by visiting them."""
