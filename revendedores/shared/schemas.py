from pydantic import BaseModel, ConfigDict
from datetime import datetime
from decimal import Decimal

class RevendedoresBaseModel(BaseModel):
    """
    Clase base para los esquemas, con configuración de Pydantic v2.
    Los montos viajan como float en JSON.
    """
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={
            Decimal: float,
            datetime: lambda v: v.isoformat(),
        }
    )
