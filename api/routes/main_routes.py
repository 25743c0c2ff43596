"""
Main routes for the application: the filtered artist listing
"""
from flask import Blueprint, render_template, request
from jinja2 import TemplateError

from utils.config import CONFIG
from utils.logger import logger
from ..models.query import Query
from ..services.errors import RenderError, TrackerError
from ..services.fetch_service import FetchService
from ..services.filter_service import FilterService
from ..services.sort_service import SortService
from ..services.view_model_service import ViewModelService

main_bp = Blueprint('main', __name__)


def _error_response(message):
    logger(message, "ERROR")
    return message, 500, {'Content-Type': 'text/plain; charset=utf-8'}


@main_bp.route('/')
def index():
    """Artist listing filtered and sorted from the query string"""
    query = Query.from_args(request.args)

    try:
        relations = FetchService.fetch_relations(CONFIG['RELATIONS_URL'])
    except TrackerError as e:
        return _error_response(f"Error while fetching data from the relations API: {e}")

    try:
        artists = FetchService.fetch_artists(CONFIG['ARTISTS_URL'])
    except TrackerError as e:
        return _error_response(f"Error while fetching data from the artists API: {e}")

    filtered = FilterService.apply_filters(artists, relations, query)
    ordered = SortService.sort_artists(filtered, relations, query.sort_by, query.order_by)
    view_model = ViewModelService.build_view_model(ordered, relations, query)

    try:
        return render_view(view_model, query)
    except RenderError as e:
        return _error_response(f"Error while rendering the template: {e}")


def render_view(view_model, query):
    """Render index.html for view_model, raising RenderError on template failure"""
    try:
        return render_template(CONFIG['TEMPLATE'], query=query, **view_model._asdict())
    except TemplateError as e:
        raise RenderError(str(e)) from e
