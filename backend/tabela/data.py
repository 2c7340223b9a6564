"""Demo roster for the `flask schedule` commands."""

# (id, name, abbreviation)
DEMO_CLUBS = [
    ("club-01", "Atlético Vila Nova", "AVN"),
    ("club-02", "Esporte Clube Serrano", "ECS"),
    ("club-03", "União Ribeirinha", "URI"),
    ("club-04", "Grêmio do Porto", "GDP"),
    ("club-05", "Independente FC", "IFC"),
    ("club-06", "Santa Cruz do Vale", "SCV"),
    ("club-07", "Real Campestre", "RCA"),
    ("club-08", "Operário da Serra", "ODS"),
    ("club-09", "Estrela do Norte", "EDN"),
    ("club-10", "Ferroviário Central", "FEC"),
    ("club-11", "Botafogo da Praia", "BDP"),
    ("club-12", "Juventude Unida", "JUN"),
    ("club-13", "Palmeiras do Sul", "PDS"),
    ("club-14", "Internacional Lagoa", "INL"),
    ("club-15", "Comercial Paulistano", "COP"),
    ("club-16", "América do Bairro", "ADB"),
]
