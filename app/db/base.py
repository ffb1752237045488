from sqlalchemy.ext.declarative import declarative_base

Base = declarative_base()
import app.models.user
import app.models.student
import app.models.tablet
import app.models.activity
import app.models.alert
import app.models.blocked_site
import app.models.security_policy
