from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_bcrypt import Bcrypt
from flask_cors import CORS

# public site + admin panel origins are set in create_app
cors = CORS()

# content stores, contact log, admin accounts and the CV slot
db = SQLAlchemy()
migrate = Migrate()

# bearer tokens guarding every admin-only route
jwt = JWTManager()

# admin password hashing
bcrypt = Bcrypt()
