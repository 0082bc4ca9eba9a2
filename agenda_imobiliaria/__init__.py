"""Visit scheduling for real-estate appraisers: entities, routing and a command line."""

__version__ = "0.1.0"