"""
Response helpers shared by the blueprints.

Loaders build a plain dict; respond() either renders it into a template
or, for clients asking for JSON, returns it as-is. Models take their
timestamps from utc_now.
"""

from datetime import datetime, timezone

from flask import jsonify, render_template, request


def utc_now():
    return datetime.now(timezone.utc)


def wants_json():
    """True when the client prefers application/json over HTML."""
    accept = request.accept_mimetypes
    best = accept.best_match(['application/json', 'text/html'])
    return best == 'application/json' and accept[best] > accept['text/html']


def respond(template, data, status=200, **context):
    """Render ``data`` with ``template`` or serialize it as JSON.

    Extra ``context`` is only passed to the template.
    """
    if wants_json():
        return jsonify(data), status
    return render_template(template, **data, **context), status
