from typing import Any, Dict, Optional, Tuple
from .schema import Observation
from pydantic import ValidationError

class ObservationValidator:
    def validate(self, record: Dict[str, Any]) -> Tuple[Optional[Observation], str]:
        try:
            return Observation(**record), ""
        except ValidationError as e:
            return None, str(e)
