from rest_framework.parsers import JSONParser


class AnyContentJSONParser(JSONParser):
    """Lit le corps en JSON quel que soit le Content-Type annoncé.

    Placé après `JSONParser` : un corps `text/plain` contenant du JSON est
    accepté, un corps illisible donne une `ParseError` (400).
    """

    media_type = "*/*"
