""" Esquemas Pydantic das notificações enviadas aos instrutores """

from pydantic import BaseModel, ConfigDict, Field


class RemovalEntry(BaseModel):
    """ Par (grupo, usuário) removido """
    model_config = ConfigDict(frozen=True)

    group_name: str
    user_name: str

class InstructorNotification(BaseModel):
    """ Conteúdo do aviso de remoção para um instrutor do curso """

    instructor_name: str
    course_name: str
    removals: list[RemovalEntry] = Field(default_factory=list)

class Sender(BaseModel):
    """ Remetente dos avisos (endereço de não-resposta) """
    model_config = ConfigDict(frozen=True)

    email: str
    name: str = ""
