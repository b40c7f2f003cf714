# db_cli.py - Brainrot DB CLI
import os, sys, json, argparse
from typing import List

# Ensure local package import works when running directly
sys.path.insert(0, os.path.abspath("."))

# Make sure dev bootstrap doesn't fight migrations
os.environ.setdefault("AUTO_CREATE_TABLES", "0")

from brainrot import create_app
from brainrot.config import rarity_weight, rules_from_config
from brainrot.errors import NotFound
from brainrot.models import db, User, InventorySlot, utcnow
from brainrot.services import catalog, inventory
from brainrot.store import Store


def _fmt_dt(value):
    return value.isoformat() if value else None


def print_rows(rows: List[tuple], headers: List[str]) -> None:
    if not rows:
        print("(no rows)")
        return
    widths = [len(h) for h in headers]
    for r in rows:
        for i, v in enumerate(r):
            widths[i] = max(widths[i], len("" if v is None else str(v)))
    line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    print(line)
    print("-+-".join("-" * w for w in widths))
    for r in rows:
        print(" | ".join(("" if v is None else str(v)).ljust(widths[i]) for i, v in enumerate(r)))


def cmd_init(args):
    db.create_all()
    print("tables created")


def cmd_seed(args):
    if args.file:
        with open(args.file, encoding="utf-8") as fh:
            entries = json.load(fh)
    else:
        from seeds.brainrots import BRAINROTS
        entries = BRAINROTS
    store = Store()
    added = catalog.seed_catalog(store, entries)
    store.commit()
    print(json.dumps({"ok": True, "added": added}, indent=2))


def cmd_catalog(args):
    rows = [(b.id, b.name, b.rarity, rarity_weight(b.rarity)) for b in catalog.list_catalog(Store())]
    print_rows(rows, ["id", "name", "rarity", "weight"])


def cmd_users(args):
    store = Store()
    rows = []
    for u in store.query(User, order_by=[User.username]):
        rows.append((
            u.username,
            inventory.count_non_pending(store, u),
            "yes" if inventory.get_pending(store, u) else "",
            _fmt_dt(u.last_farmed_at),
            _fmt_dt(u.last_stole_at),
        ))
    print_rows(rows, ["username", "slots", "pending", "last_farmed_at", "last_stole_at"])


def cmd_inventory(args):
    store = Store()
    try:
        user = store.find(User, username=args.username.lower())
    except NotFound:
        print("user not found")
        return
    rows = [
        (s.id, s.brainrot.name, s.brainrot.rarity, "pending" if s.is_pending else "", _fmt_dt(s.pending_since))
        for s in store.query(InventorySlot, user_id=user.id, order_by=[InventorySlot.id])
    ]
    print_rows(rows, ["slot_id", "name", "rarity", "state", "pending_since"])


def cmd_sweep(args):
    from flask import current_app
    store = Store()
    rules = rules_from_config(current_app.config)
    removed = inventory.sweep_expired_pending(store, utcnow(), rules.replace_timeout)
    store.commit()
    print(json.dumps({"ok": True, "removed": removed}, indent=2))


def build_parser():
    p = argparse.ArgumentParser(description="Brainrot DB CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("init", help="Create tables (dev)")
    s.set_defaults(func=cmd_init)

    s = sub.add_parser("seed", help="Load the brainrot catalog (skips known names)")
    s.add_argument("--file", help="JSON list of {name, rarity}; defaults to seeds/brainrots.py")
    s.set_defaults(func=cmd_seed)

    s = sub.add_parser("catalog", help="List the catalog with draw weights")
    s.set_defaults(func=cmd_catalog)

    s = sub.add_parser("users", help="List users with slot counts and cooldowns")
    s.set_defaults(func=cmd_users)

    s = sub.add_parser("inventory", help="Show a user's slots")
    s.add_argument("username")
    s.set_defaults(func=cmd_inventory)

    s = sub.add_parser("sweep", help="Delete every expired pending slot")
    s.set_defaults(func=cmd_sweep)

    return p


def main():
    app = create_app()
    with app.app_context():
        args = build_parser().parse_args()
        args.func(args)


if __name__ == "__main__":
    main()
