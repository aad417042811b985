from abc import ABC, abstractmethod
from typing import List
from app.models import Recipe

class RecipeSource(ABC):
    name: str = "Unknown"

    @abstractmethod
    def load_recipes(self) -> List[Recipe]:
        """
        Load the recipes this source provides.
        Must return a list of canonical `Recipe` objects in catalog order.
        """
        pass
