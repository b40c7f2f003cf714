import logging

from ..errors import GameRuleViolation
from ..services import catalog, cooldowns
from ..services import inventory as inv
from .registry import Action, ActionContext, action

logger = logging.getLogger(__name__)


@action(Action.FARM)
def farm(ctx: ActionContext) -> str:
    user, rules = ctx.user, ctx.rules
    left = cooldowns.remaining(user.last_farmed_at, rules.farm_cooldown, ctx.now)
    if left > 0:
        raise GameRuleViolation(
            "E_COOLDOWN",
            f"{ctx.display_name}, aún no puedes farmear. Vuelve en {cooldowns.format_wait(left)}.",
        )

    item = catalog.draw_random_item(ctx.store, ctx.rng)
    slot = inv.store_item(ctx.store, user, item.id, rules.capacity, ctx.now)
    # the cooldown is spent once the draw succeeded, full inventory or not
    cooldowns.consume(ctx.store, user, "farm", ctx.now)
    logger.info("%s farmed %s (%s)%s", user.username, item.name, item.rarity,
                " as pending" if slot.is_pending else "")

    if slot.is_pending:
        return (
            f"{ctx.display_name} ha farmeado un: {item.name} ({item.rarity}), pero su inventario "
            f"está lleno ({rules.capacity}/{rules.capacity}). Tienes "
            f"{cooldowns.format_wait(rules.replace_timeout)} para usar "
            f"!brainrot remplazo <número> o se perderá."
        )
    return f"{ctx.display_name} ha farmeado un: {item.name} ({item.rarity})!"
