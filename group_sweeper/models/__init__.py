""" Inicialização dos modelos para importação do SQLAlchemy """

#Importa os modelos aqui para o SQLAlchemy reconhecer na criação de tabelas
from .models_users import User
from .models_courses import Course, EnrolInstance, UserEnrolment
from .models_groups import Group, GroupMember
from .models_roles import Role, RoleAssignment
from .models_logs import LogEvent
from .models_notifications import NotificationLog
