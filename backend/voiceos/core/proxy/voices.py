"""
Voice catalogue offered by the upstream provider.
"""
from typing import List
from pydantic import BaseModel


class Voice(BaseModel):
    id: str
    name: str
    language: str


VOICES: List[Voice] = [
    Voice(id="english_us_male", name="English US Male (Andrew)", language="en-US"),
    Voice(id="english_uk_male", name="English UK Male (Ryan)", language="en-GB"),
    Voice(id="hindi_male", name="Hindi Male (Madhur)", language="hi-IN"),
    Voice(id="german_male", name="German Male (Conrad)", language="de-DE"),
    Voice(id="french_male", name="French Male (Henri)", language="fr-FR"),
    Voice(id="spanish_male", name="Spanish Male (Alvaro)", language="es-ES"),
    Voice(id="italian_male", name="Italian Male (Diego)", language="it-IT"),
    Voice(id="portuguese_male", name="Portuguese Male (Duarte)", language="pt-PT"),
    Voice(id="russian_male", name="Russian Male (Dmitry)", language="ru-RU"),
    Voice(id="japanese_male", name="Japanese Male (Keita)", language="ja-JP"),
]
