from .common import DocumentModel

class DoctorCreate(DocumentModel):
    email: str
