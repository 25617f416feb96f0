import datetime
import logging
import os

from demo_api.database import SessionLocal
from demo_api.models.expense import Category, Transaction, TransactionType

# Importa os modelos do blog para que o SQLAlchemy registre todas as tabelas
from demo_api.models.blog import Post, Comment

DEFAULT_CATEGORIES = ["Food", "Transport", "Salary", "Entertainment"]

# (descrição, valor, tipo, nome da categoria), registradas no dia atual
SAMPLE_TRANSACTIONS = [
    ("Lunch", 80.0, TransactionType.EXPENSE, "Food"),
    ("BTS fare", 45.0, TransactionType.EXPENSE, "Transport"),
    ("Monthly salary", 30000.0, TransactionType.INCOME, "Salary"),
]


def seed_enabled():
    return os.environ.get("SEED_DEFAULTS", "1").lower() not in ("0", "false", "no")


def create_default_categories(db):
    """Insere as categorias padrão quando a tabela está vazia."""
    if db.query(Category).count() > 0:
        logging.info("Categorias já existem, nada a fazer.")
        return
    for name in DEFAULT_CATEGORIES:
        db.add(Category(name=name))
    db.commit()
    logging.info(f"{len(DEFAULT_CATEGORIES)} categorias criadas")


def create_sample_transactions(db, today=None):
    """
    Insere as transações de exemplo no dia atual quando não há nenhuma,
    para que o relatório do mês corrente não comece vazio.
    """
    if db.query(Transaction).count() > 0:
        logging.info("Transações já existem, nada a fazer.")
        return
    today = today or datetime.date.today()
    ids = {c.name: c.id for c in db.query(Category).all()}
    created = 0
    for description, amount, tx_type, category_name in SAMPLE_TRANSACTIONS:
        if category_name not in ids:
            logging.warning(f"Categoria {category_name!r} ausente, transação de exemplo {description!r} ignorada")
            continue
        db.add(Transaction(
            description=description,
            amount=amount,
            type=tx_type,
            date=today.isoformat(),
            category_id=ids[category_name]
        ))
        created += 1
    db.commit()
    logging.info(f"{created} transações de exemplo criadas")


def seed_demo_data(db=None):
    own_session = db is None
    if own_session:
        db = SessionLocal()

    try:
        create_default_categories(db)
        create_sample_transactions(db)
    except Exception as e:
        logging.error(f"Erro ao criar dados de exemplo: {e}")
        db.rollback()
        raise
    finally:
        if own_session:
            db.close()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_demo_data()
