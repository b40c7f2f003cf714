"""inventario / descartar / remplazo."""
from __future__ import annotations

import logging

from ..errors import GameRuleViolation
from ..services import cooldowns
from ..services import inventory as inv
from .registry import Action, ActionContext, action

logger = logging.getLogger(__name__)

PENDING_KEYWORDS = {"pendiente", "pending", "temporal"}


def _parse_index(raw: str | None) -> int | None:
    raw = (raw or "").strip().lstrip("#")
    if not raw.isdigit():
        return None
    return int(raw)


def render_inventory(ctx: ActionContext) -> str:
    user, rules = ctx.user, ctx.rules
    slots = inv.list_slots(ctx.store, user)
    pending = inv.get_pending(ctx.store, user)
    if not slots and pending is None:
        return f"El inventario de {ctx.display_name} está vacío (0/{rules.capacity})."

    listing = ", ".join(
        f"{n}. {s.brainrot.name} ({s.brainrot.rarity})" for n, s in enumerate(slots, start=1)
    )
    text = f"Inventario de {ctx.display_name} ({len(slots)}/{rules.capacity}): {listing or '-'}"
    if pending is not None:
        left = cooldowns.remaining(pending.pending_since, rules.replace_timeout, ctx.now)
        text += (
            f" | Pendiente: {pending.brainrot.name} ({pending.brainrot.rarity}), "
            f"expira en {cooldowns.format_wait(left)}. Usa !brainrot remplazo <número>."
        )
    return text


@action(Action.INVENTORY)
def view_inventory(ctx: ActionContext) -> str:
    return render_inventory(ctx)


@action(Action.DISCARD)
def discard(ctx: ActionContext) -> str:
    target = (ctx.target or "").strip().lower()
    if target in PENDING_KEYWORDS:
        pending = inv.get_pending(ctx.store, ctx.user)
        if pending is None:
            raise GameRuleViolation(
                "E_NO_PENDING", f"{ctx.display_name}, no tienes ningún brainrot pendiente."
            )
        name = pending.brainrot.name
        inv.remove_slot(ctx.store, pending.id)
        logger.info("%s discarded pending %s", ctx.user.username, name)
        return f"{ctx.display_name} ha descartado {name} (pendiente)."

    index = _parse_index(ctx.target)
    slot = inv.slot_at(ctx.store, ctx.user, index) if index is not None else None
    if slot is None:
        hint = "Indica el número del brainrot a descartar." if index is None else f"No existe el brainrot #{index}."
        raise GameRuleViolation("E_BAD_SLOT", f"{hint} {render_inventory(ctx)}")

    name = slot.brainrot.name
    inv.remove_slot(ctx.store, slot.id)
    logger.info("%s discarded %s", ctx.user.username, name)
    return f"{ctx.display_name} ha descartado {name}."


@action(Action.REPLACE)
def replace(ctx: ActionContext) -> str:
    pending = inv.get_pending(ctx.store, ctx.user)
    if pending is None:
        raise GameRuleViolation(
            "E_NO_PENDING",
            f"{ctx.display_name}, no tienes ningún brainrot pendiente para remplazar.",
        )

    index = _parse_index(ctx.target)
    old = inv.slot_at(ctx.store, ctx.user, index) if index is not None else None
    if old is None:
        raise GameRuleViolation("E_BAD_SLOT", f"Número inválido. {render_inventory(ctx)}")

    old_name, new_name = old.brainrot.name, pending.brainrot.name
    inv.promote_pending(ctx.store, ctx.user, old.id)
    logger.info("%s replaced %s with %s", ctx.user.username, old_name, new_name)
    return f"{ctx.display_name} ha remplazado {old_name} por {new_name}."
