from collections.abc import Mapping

import click
from flask import Blueprint, Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import Config
from logging_config import get_logger, setup_logging
from models import EXPENSE, INCOME, db
from ledger import balances, transactions
from ledger.errors import LedgerError
from ledger.validation import (
    MISSING_EXPENSE_FIELDS,
    MISSING_INCOME_FIELDS,
    parse_balance,
    parse_entry,
)

logger = get_logger('app')

bp = Blueprint('ledger', __name__)


def create_app(config=None):
    """Build the application.

    ``config`` is a Config instance, a mapping of overrides applied on top of
    the environment configuration, or None for the environment alone.
    """
    if config is None:
        config = Config()
    elif isinstance(config, Mapping):
        config = Config().update(config)

    app = Flask(__name__)
    app.config.from_object(config)
    setup_logging(config)

    db.init_app(app)
    app.register_blueprint(bp)
    _register_error_handlers(app)
    _register_commands(app)

    with app.app_context():
        init_schema()
    return app


def init_schema():
    """Create the balances and transactions tables if they do not exist."""
    try:
        db.create_all()
    except Exception:
        logger.exception('Schema initialization failed')
        raise
    logger.info('Tables "balances" and "transactions" created or already exist.')


# ---------------------- Error Handling ----------------------
def _register_error_handlers(app):
    @app.errorhandler(LedgerError)
    def handle_ledger_error(error):
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception('Error handling %s %s', request.method, request.path, exc_info=error)
        return jsonify({'error': 'Internal Server Error'}), 500


# ---------------------- CLI ----------------------
def _register_commands(app):
    @app.cli.command('init-db')
    def init_db_command():
        """Create the ledger tables."""
        init_schema()
        click.echo('Database initialized.')

    @app.cli.command('reset-db')
    @click.confirmation_option(prompt='Delete the balance and every transaction?')
    def reset_db_command():
        """Delete the balance and every transaction."""
        click.echo(balances.reset())


# ---------------------- Routes: Balance ----------------------
@bp.route('/balance', methods=['POST'])
def set_balance():
    amount = parse_balance(request.get_json(silent=True))
    return jsonify({'message': balances.set_initial_balance(amount)})


@bp.route('/balance', methods=['GET'])
def get_balance():
    return jsonify({'balance': float(balances.get_balance())})


@bp.route('/balance', methods=['DELETE'])
def reset_balance():
    return jsonify({'message': balances.reset()})


# ---------------------- Routes: Transactions ----------------------
@bp.route('/expense', methods=['POST'])
def add_expense():
    text, value = parse_entry(request.get_json(silent=True), MISSING_EXPENSE_FIELDS)
    return jsonify(transactions.add_expense(text, value))


@bp.route('/income', methods=['POST'])
def add_income():
    text, value = parse_entry(request.get_json(silent=True), MISSING_INCOME_FIELDS)
    return jsonify(transactions.add_income(text, value))


@bp.route('/expense', methods=['GET'])
def list_expenses():
    return jsonify(transactions.list_by_type(EXPENSE))


@bp.route('/income', methods=['GET'])
def list_income():
    return jsonify(transactions.list_by_type(INCOME))


@bp.route('/transaction', methods=['GET'])
def list_today():
    return jsonify(transactions.list_today())


@bp.route('/transaction/<int:transaction_id>', methods=['DELETE'])
def delete_transaction(transaction_id):
    return jsonify({'message': transactions.delete_transaction(transaction_id)})


@bp.route('/summary', methods=['GET'])
def summary():
    return jsonify(transactions.summary())


# ---------------------- Run App ----------------------
if __name__ == '__main__':
    config = Config()
    create_app(config).run(host='0.0.0.0', port=config.PORT)
