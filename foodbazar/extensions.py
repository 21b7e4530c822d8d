# Overview: Flask extension instances for the storage database.

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
