"""
handlers/ - Presentation Layer
================================
Console handlers. The menu controller reads user input through a ConsoleIO,
delegates to the StudentService, and writes the response back to the user.
No business logic lives here.
"""
