""" Esquemas Pydantic dos registros lidos durante a reconciliação """

from pydantic import BaseModel, ConfigDict


class GroupMembership(BaseModel):
    """ Participação de um usuário suspenso em um grupo do curso """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    group_id: int
    user_id: int
    group_name: str
    course_short_name: str
    user_display_name: str
