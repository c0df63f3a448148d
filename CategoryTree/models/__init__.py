# Model imports - organized by domain
# Core models (database engine and shared components)
from .models import *

# Domain-specific models
from .category_models import *
