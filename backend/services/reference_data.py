"""Predefined parts and skills seeded into every new company's catalog."""

PREDEFINED_PARTS: list[str] = sorted(
    [
        "Compressor",
        "Capacitor",
        "Contactor",
        "Refrigerant R-410A",
        "Refrigerant R-22",
        "Thermostat",
        "Filter Drier",
        "Igniter",
        "Flame Sensor",
        "Gas Valve",
        "Blower Motor",
        "Inducer Motor",
        "Pressure Switch",
        "Control Board",
        "Copper Pipe (1/2 in)",
        "Copper Pipe (3/4 in)",
        "PVC Pipe (1 in)",
        "P-Trap Assembly",
        "Faucet Cartridge",
        "Toilet Flapper",
        "Wax Ring",
        "Sump Pump",
        "Garbage Disposal Unit",
        "Circuit Breaker (15A)",
        "Circuit Breaker (20A)",
        "GFCI Outlet",
        "Light Switch",
        "Electrical Wire (12/2)",
        "Electrical Wire (14/2)",
        "Wire Nuts",
    ]
)

PREDEFINED_SKILLS: list[str] = sorted(
    [
        "HVAC - General",
        "HVAC - AC Repair",
        "HVAC - Furnace Repair",
        "HVAC - Heat Pumps",
        "HVAC - Installation",
        "HVAC - Commercial Systems",
        "HVAC - Residential Systems",
        "Refrigeration - Commercial",
        "Refrigeration - Residential",
        "Ductwork Fabrication",
        "Ductwork Installation",
        "Ventilation Systems",
        "Boiler Maintenance & Repair",
        "Hydronic Heating Systems",
        "Geothermal Systems",
        "Plumbing - General",
        "Plumbing - Drain Cleaning",
        "Plumbing - Water Heaters",
        "Gas Certified - Installation",
        "Gas Certified - Repair",
        "Electrical - General",
        "Electrical - Wiring",
        "Electrical - Panel Upgrades",
        "Smart Home Device Installation",
        "Leak Detection",
        "Sheet Metal Fabrication",
        "Customer Service Excellence",
        "Sales & Quoting",
        "Safety Compliance (General)",
        "Digital Protocol Usage",
    ]
)
