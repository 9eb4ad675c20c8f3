"""
Configuration constants for CEPFinder
"""

API_URL = "https://viacep.com.br/ws/{cep}/json/"

XML_ROOT_TAG = "localidade"

# Attribute name -> key used by the ViaCEP JSON payload, in snapshot order.
FIELDS = {
    "postal_code": "cep",
    "street": "logradouro",
    "complement": "complemento",
    "neighborhood": "bairro",
    "city": "localidade",
    "state": "uf",
    "unit": "unidade",
    "ibge_code": "ibge",
    "gia_code": "gia",
}

WIRE_TO_FIELD = {wire: name for name, wire in FIELDS.items()}

# Lower-cased names accepted by the name-keyed accessors: the attribute
# names, their camel-case spellings ("postalCode") and the ViaCEP keys.
FIELD_ALIASES = {
    "postal_code": "postal_code",
    "postalcode": "postal_code",
    "street": "street",
    "complement": "complement",
    "neighborhood": "neighborhood",
    "city": "city",
    "state": "state",
    "unit": "unit",
    "ibge_code": "ibge_code",
    "ibgecode": "ibge_code",
    "gia_code": "gia_code",
    "giacode": "gia_code",
    **WIRE_TO_FIELD,
}
