"""
Core building blocks shared by the rest of the application: settings,
logging configuration and the htmx wire vocabulary.
"""
