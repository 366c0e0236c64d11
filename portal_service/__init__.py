"""Package marker for the job portal service.

Cookie-authenticated JSON API over the jobportal MongoDB database.
"""

__version__ = "1.0.0"
