import logging

from ..errors import GameRuleViolation
from ..services import cooldowns
from ..services import inventory as inv
from ..services.users import eligible_victims, get_or_create_user, normalize
from .registry import Action, ActionContext, action

logger = logging.getLogger(__name__)


def pick_victim(store, actor: str, target, rng):
    """Name of the user to rob, chosen before locks are taken."""
    if target and normalize(target):
        return normalize(target)
    candidates = eligible_victims(store, actor)
    if not candidates:
        return None
    return rng.choice(candidates).username


@action(Action.STEAL, participants=pick_victim)
def steal(ctx: ActionContext) -> str:
    thief, rules = ctx.user, ctx.rules
    left = cooldowns.remaining(thief.last_stole_at, rules.steal_cooldown, ctx.now)
    if left > 0:
        raise GameRuleViolation(
            "E_COOLDOWN",
            f"{ctx.display_name}, aún no puedes robar. Vuelve en {cooldowns.format_wait(left)}.",
        )

    if ctx.victim_name == thief.username:
        raise GameRuleViolation(
            "E_SELF_TARGET",
            f"{ctx.display_name} intentó robarse a sí mismo y solo consiguió perder su dignidad.",
        )
    if ctx.victim_name is None:
        raise GameRuleViolation("E_NO_VICTIMS", "No hay nadie a quien robar. Todos están pobres.")

    victim = get_or_create_user(ctx.store, ctx.victim_name)
    victim_label = ctx.target.strip().lstrip("@") if normalize(ctx.target) else victim.username

    # entering the steal path spends the cooldown, whatever happens next
    cooldowns.consume(ctx.store, thief, "steal", ctx.now)

    loot = inv.list_slots(ctx.store, victim)
    if not loot:
        return (
            f"{victim_label.upper()} no tiene brainrots. "
            f"{ctx.display_name} intentó robarle a un pobre."
        )

    if ctx.rng.random() >= rules.steal_success_chance:
        logger.info("%s failed to rob %s", thief.username, victim.username)
        return (
            f"¡Robo fallido! {victim_label} se dio cuenta y aseguró sus memes. "
            f"{ctx.display_name} huye con las manos vacías."
        )

    taken = ctx.rng.choice(loot)
    item = taken.brainrot
    inv.remove_slot(ctx.store, taken.id)
    slot = inv.store_item(ctx.store, thief, item.id, rules.capacity, ctx.now)
    logger.info("%s stole %s from %s%s", thief.username, item.name, victim.username,
                " as pending" if slot.is_pending else "")

    text = f"¡ROBO EXITOSO! {ctx.display_name} le ha robado un [{item.name}] a {victim_label}!"
    if slot.is_pending:
        text += (
            f" Inventario lleno: tienes {cooldowns.format_wait(rules.replace_timeout)} "
            f"para usar !brainrot remplazo <número>."
        )
    return text
