"""
Public Blueprint
"""

from flask import Blueprint, render_template

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Public landing page"""
    return render_template('welcome.html')
