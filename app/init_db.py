# init_db.py
import logging
from app.database import engine, Base
from app.db.models import User, Store, Product

logger = logging.getLogger(__name__)

def init():
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init()
