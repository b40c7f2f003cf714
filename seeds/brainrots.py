"""Default brainrot catalog."""
from brainrot import create_app
from brainrot.models import db
from brainrot.services.catalog import seed_catalog
from brainrot.store import Store

BRAINROTS = [
    {"name": "Tung Tung Tung Sahur", "rarity": "Common"},
    {"name": "Tralalero Tralala", "rarity": "Common"},
    {"name": "Bombardiro Crocodilo", "rarity": "Common"},
    {"name": "Lirili Larila", "rarity": "Common"},
    {"name": "Boneca Ambalabu", "rarity": "Rare"},
    {"name": "Brr Brr Patapim", "rarity": "Rare"},
    {"name": "Chimpanzini Bananini", "rarity": "Rare"},
    {"name": "Cappuccino Assassino", "rarity": "Epic"},
    {"name": "Trippi Troppi", "rarity": "Epic"},
    {"name": "Ballerina Cappuccina", "rarity": "Legendary"},
    {"name": "Frigo Camelo", "rarity": "Legendary"},
    {"name": "Glorbo Fruttodrillo", "rarity": "Mythic"},
    {"name": "La Vaca Saturno Saturnita", "rarity": "Secret"},
    {"name": "Garama and Madundung", "rarity": "Brainrot God"},
]


def run():
    app = create_app()
    with app.app_context():
        db.create_all()
        store = Store()
        added = seed_catalog(store, BRAINROTS)
        store.commit()
        print("Seeded", added, "brainrots")


if __name__ == "__main__":
    run()
