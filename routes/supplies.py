"""
Supplies page.

Only available for printers that report supply levels.
"""

from flask import Blueprint, abort, render_template

from modules.status_view import supply_bars
from .forms import get_printer


supplies_bp = Blueprint("supplies", __name__)


@supplies_bp.route("/supplies", methods=["GET"])
def supplies():
    """Render one level bar per supply."""
    printer = get_printer()
    if not printer.get_driver_options().has_supplies:
        abort(404)

    return render_template(
        "supplies.html",
        page="supplies",
        title="Supplies",
        bars=supply_bars(printer.get_supplies()),
    )
