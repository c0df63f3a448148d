from sqlmodel import SQLModel
from CategoryTree.models.models import engine
# Import all model modules to register them with SQLModel metadata
from CategoryTree.models.category_models import *


# Function to create tables in the configured database
def create_db_and_tables(bind=None):
    SQLModel.metadata.create_all(bind if bind is not None else engine)
