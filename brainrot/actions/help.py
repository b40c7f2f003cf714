from .registry import Action, ActionContext, action

USAGE = (
    "Comandos: !brainrot farmear | !brainrot inventario | !brainrot robar [usuario] | "
    "!brainrot remplazo <número> | !brainrot descartar <número|pendiente>"
)


@action(Action.HELP, needs_user=False)
def show_help(ctx: ActionContext | None = None) -> str:
    return USAGE
