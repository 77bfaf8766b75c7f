class BaseAppException(Exception):
    """Clase base para excepciones personalizadas de la aplicación."""
    pass

class StorageError(BaseAppException):
    """Excepción base para errores del almacenamiento persistente."""
    def __init__(self, message="Error en el almacenamiento de datos.", original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception

class StorageWriteError(StorageError):
    """Excepción para fallos al escribir el documento del almacén."""
    def __init__(self, message="No se pudo guardar el documento de datos.", original_exception=None):
        super().__init__(message, original_exception)

class MalformedDocumentError(StorageError):
    """Excepción para un documento persistido corrupto o con esquema incompatible."""
    def __init__(self, message="El documento almacenado está corrupto o es incompatible.", original_exception=None):
        super().__init__(message, original_exception)

class InvalidStatusError(BaseAppException):
    """Excepción para un estado que no pertenece al tipo de registro."""
    def __init__(self, status, allowed=()):
        super().__init__(f"Estado '{status}' inválido. Valores permitidos: {', '.join(allowed)}.")
        self.status = status
        self.allowed = tuple(allowed)

class IdAllocationError(BaseAppException):
    """Excepción cuando no se logra asignar un ID libre en una colección."""
    def __init__(self, message="No se pudo generar un ID único.", original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception

class InvalidPayloadError(BaseAppException):
    """Excepción para datos de entrada con una forma inválida."""
    def __init__(self, message="Los datos enviados no son válidos.", original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception
