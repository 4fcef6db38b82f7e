"""
carddeck core - card, deck and wire format logic.

Modules:
    deck: Card encoding, Suit/Rank, shufflers and the Deck
    codec: binary wire format
    config: deck setup configuration
    exceptions: error hierarchy
"""
