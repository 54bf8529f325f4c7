from jwoc.http.transport import JsonResponse, RegistrationTransport, server_message

__all__ = ["JsonResponse", "RegistrationTransport", "server_message"]
