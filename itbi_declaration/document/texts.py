"""Fixed wording of the declaration."""

SPOUSE_PLACEHOLDER = "___"

DECLARA = "DECLARA"
DECLARA_TAIL = (
    ", sob as penas da lei, a aptidão agrícola do imóvel de sua titularidade, "
    "caracterizado nos termos seguintes:"
)

CONSENT_LEAD = "Declaro, sob as penas da lei"
CONSENT_TAIL = (
    ", que as informações prestadas neste formulário são verdadeiras e que a aptidão "
    "agrícola descrita corresponde à real condição do imóvel. Estou ciente de que a "
    "prestação de informações falsas configura infração punível na forma da lei."
)

LIABILITY_LEAD = "Responsabilidade civil e penal:"
LIABILITY_TAIL = (
    " O declarante assume inteira responsabilidade pelas informações prestadas neste "
    "documento, submetendo-se às sanções previstas no art. 299 do Código Penal Brasileiro "
    "(falsidade ideológica), bem como às penalidades administrativas estipuladas na Lei "
    "Complementar Municipal nº 878/2021 (Código Tributário Municipal de Porto Velho)."
)

PROPERTY_TABLE_TITLE = "Dados Cadastrais do Imóvel"
PROPERTY_TABLE_COLUMNS = ("Dados Cadastrais do Imóvel", "Informação")
LAND_USE_TABLE_TITLE = "Aptidão Agrícola Declarada — Uso e Cobertura do Solo"
LAND_USE_TABLE_COLUMNS = ("Descrição da Aptidão", "Área (ha)")
LAND_USE_TOTAL_LABEL = "TOTAL DECLARADO"

NOTES_LEAD = "Observações:"
SIGNATURE_DECLARANT = "Declarante"
SIGNATURE_PLACE_DATE = "Local e Data"
