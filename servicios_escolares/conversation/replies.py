# servicios_escolares/conversation/replies.py

# Textos fijos del asistente. Incluyen marcado HTML (<strong>, <br>, <a>) que la
# capa de presentación muestra tal cual, por lo que no deben reformatearse.

FIRST_GREETING = "¡Hola! 👋 ¡Qué gusto saludarte! 😊 Soy el Asistente PCB de la Escuela Superior Vocacional Pablo Colón Berdecia. Estoy aquí para ayudarte con cualquier duda que tengas sobre nuestros servicios, horarios o cualquier información de la escuela. ¿En qué puedo servirte hoy?"

GREETINGS = (
    "¡Hola de nuevo! 😊 ¿En qué puedo ayudarte hoy?",
    "¡Buenos días/tardes! 🌟 ¿En qué te puedo asistir?",
    "¡Hey! 👋 ¡Me alegra verte de nuevo! ¿Qué necesitas saber?",
    "¡Hola! 😊 ¿Tienes alguna pregunta sobre la escuela?",
)

FAREWELLS = (
    "¡Adiós! 👋 Fue un placer ayudarte. ¡Que tengas un excelente día!",
    "¡Hasta luego! 😊 Si necesitas algo más, aquí estaré.",
    "¡Bye! 👋 ¡Que te vaya muy bien en tu día!",
    "¡Nos vemos! 🌟 Fue un gusto asistirte.",
)

THANKS = (
    "¡De nada! 😊 ¡Para eso estoy aquí! ¿Hay algo más en lo que pueda ayudarte?",
    "¡Con mucho gusto! 😄 Si tienes más preguntas, no dudes en preguntar.",
    "¡Para eso estamos! 😊 ¿Necesitas algo más?",
    "¡De nada! 🙌 Estoy para servirte. ¿En qué más puedo ayudarte?",
)

ENROLLMENT = "Para realizar tu matrícula, te llevo a la sección correspondiente 👉 <a href='matricula.html'>Matrícula Online</a>. Allí podrás completar el formulario de inscripción de forma fácil y rápida. ¿Necesitas ayuda con algo más?"

DOCUMENT_REQUESTS = "Por supuesto, puedo ayudarte con eso 📄. Te llevo a la sección de solicitudes 👉 <a href='solicitudes.html'>Solicitud de Documentos</a>. Allí puedes pedir certificaciones, transcripciones y más. ¿Te gustaría saber algo más?"

TECH_SUPPORT = "Para soporte técnico y mantenimiento de equipos, visita nuestra sección 👉 <a href='servicios-tecnicos.html'>Servicios Técnicos</a>. Nuestro equipo te ayudará con cualquier problema de tecnología. ¿Hay algo específico que necesites?"

NURSE = "Para atención de enfermería y servicios de salud 👉 <a href='enfermeria.html'>Enfermería</a>. Tenemos personal capacitado para atender urgencias básicas y administrar medicamentos con autorización. ¿Necesitas más información?"

COUNSELING = "Para orientación académica y apoyo psicológico 👉 <a href='orientacion.html'>Orientación</a>. Nuestros consejeros están disponibles para ayudarte con cualquier situación académica o personal. ¿En qué puedo orientarte?"

LIBRARY = "Para la biblioteca y préstamos de libros 👉 <a href='biblioteca.html'>Biblioteca</a>. Nuestro catálogo tiene muchos recursos de estudio disponibles. ¿Buscas algún libro en específico?"

CAFETERIA = "Para el servicio de comedor y ver el menú 👉 <a href='comedor.html'>Comedor</a>. Sirvimos almuerzos de 11:00 AM a 1:00 PM. ¿Tienes alguna pregunta sobre la comida?"

PARENT_PORTAL = "Para el portal de comunicación con padres 👉 <a href='padres.html'>Portal de Padres</a>. Allí puedes comunicarte directamente con los maestros y ver información de tus hijos. ¿Necesitas algo más?"

SECURITY = "Para temas de seguridad y registro de visitantes 👉 <a href='seguridad.html'>Seguridad</a>. Puedes registrar visitantes y reportar incidentes. ¿En qué puedo ayudarte?"

ACADEMIC_EVIDENCE = "Para ver el dashboard de evidencia y seguimiento académico 👉 <a href='evidencia.html'>Dashboard Evidencia</a>. ¿Necesitas información adicional sobre el seguimiento?"

TEACHER_EMAILS = "Aquí puedes ver los correos electrónicos de los maestros 👉 <a href='correos-maestros-tabla.html'>Correos Electrónicos</a>. ¿Necesitas contactar a algún profesor en específico?"

MICROSOFT_TEAMS = "Para acceder a Microsoft Teams (clases virtuales) 👉 <a href='https://login.microsoftonline.com/common/oauth2/v2.0/authorize?client_id=5e3ce6c0-2b1f-4285-8d4b-75ee78787346&scope=openId%20profile%20openid%20offline_access&redirect_uri=https%3A%2F%2Fteams.microsoft.com%2Fv2&client-request-id=019be6e8-5a6c-7d37-b129-894db9c8d8ef&response_mode=fragment&response_type=code&x-client-SKU=msal.js.browser&x-client-VER=3.30.0&client_info=1&code_challenge=6ZqFlWHLh3RpNojFPjlqU4h9HyciQoVF24L_a1_WF4A&code_challenge_method=S256&nonce=019be6e8-5a6d-7bdb-9075-c5ce0aa099ac&state=eyJpZCI6IjAxOWJlNmU4LTVhNmMtNzY0OS1hNGRlLWQ4YTQ0MTU4OGMxYyIsIm1ldGEiOnsiaW50ZXJhY3Rpb25UeXBlIjoicmVkaXJlY3QifX0%3D%7Chttps%3A%2F%2Fteams.microsoft.com%2Fv2%2F%3Fculture%3Den-us%26country%3Dus%26enablemcasfort21%3Dtrue' target='_blank'>Microsoft Teams</a>. ¡Que tengas una buena clase! 📚"

POWER_DE = "Para acceder a Power DE (portal de información estudiantil) 👉 <a href='https://informacionestudiantil.dde.pr/public/create_multi_student_account.html' target='_blank'>Power DE</a>. ¿Necesitas ayuda con tu cuenta?"

IGS_CALCULATOR = "Para calcular tu Índice de Graduación Secundária (IGS) 👉 <a href='https://admisiones.upr.edu/calculadora-igs/' target='_blank'>Calculadora IGS</a>. ¡Éxito en tus cálculos! 📊"

SPORTS = "Para ver las actividades deportivas 👉 <a href='deportes.html'>Deportes</a>. Tenemos varias disciplinas disponibles. ¿Cuál te interesa?"

CAPABILITIES = "¡Excelente! 😊 Soy el <strong>Asistente PCB</strong> y puedo ayudarte con muchas cosas:<br><br>🎓 <strong>Información de la Escuela</strong>: Horarios, ubicación, contacto, información general<br><br>📝 <strong>Matrícula</strong>: Proceso de inscripción, requisitos, fechas<br><br>📄 <strong>Solicitud de Documentos</strong>: Certificaciones, transcripciones, Records académicos<br><br>🔧 <strong>Servicios Técnicos</strong>: Soporte técnico, mantenimiento de equipos<br><br>🏥 <strong>Enfermería</strong>: Atención médica, medicamentos, emergencias<br><br>💬 <strong>Orientación</strong>: Apoyo académico, psicológico, consejería<br><br>📚 <strong>Biblioteca</strong>: Préstamo de libros, catálogo, reservas<br><br>🍽️ <strong>Comedor</strong>: Menú, horarios, información de almuerzo<br><br>👨‍👩‍👧 <strong>Portal de Padres</strong>: Comunicación con maestros, información de estudiantes<br><br>🛡️ <strong>Seguridad</strong>: Registro de visitantes, reportar incidentes<br><br>📊 <strong>Evidencia Académica</strong>: Dashboard de seguimiento, reportes<br><br>📧 <strong>Correos de Maestros</strong>: Directorio de contactos<br><br>💻 <strong>Recursos Digitales</strong>: Microsoft Teams, Power DE, Calculadora IGS<br><br>🏃 <strong>Deportes</strong>: Actividades deportivas, programas<br><br>❓ <strong>Responder Preguntas</strong>: Dudas generales sobre la escuela<br><br>🔍 <strong>Guía y Orientación</strong>: Te ayudo a encontrar lo que necesitas<br><br>¡Simplemente pregúntame lo que necesites saber! 😊"

IDENTITY = "¡Excelente pregunta! 😊 Soy el <strong>Asistente Virtual PCB</strong> de la <strong>Escuela Superior Vocacional Pablo Colón Berdecia</strong>. Estoy aquí para orientarte y ayudarte a encontrar la información que necesitas sobre nuestros servicios, horarios, procesos y más. ¡Pregúntame lo que quieras!"

LOCATION = "La Escuela Superior Vocacional Pablo Colón Berdecia está ubicada en 📍 <strong>Puerto Rico</strong>. Para más detalles específicos sobre la dirección, te recomiendo contactar a la oficina principal. ¿Te gustaría que te proporcione más información de contacto?"

CONTACT = "Para contactar a la escuela, puedes usar el formulario en nuestra sección de 📞 <a href='index.html#contacto'>Contacto</a>. Allí encontrarás los números telefónicos y correos electrónicos disponibles. ¿Necesitas algo más específico?"

SCHEDULE = "El horario escolar regular es de <strong>7:30 AM a 2:30 PM</strong> para los estudiantes. 📅 La oficina administrativa suele estar abierta de 8:00 AM a 3:00 PM. ¿Tienes alguna duda sobre un horario específico?"

YEAR_START = "El año académico típicamente comienza en agosto. 📅 Te recomiendo estar atento a nuestras publicaciones y avisos para las fechas exactas de matrícula e inicio de clases. ¿Necesitas información sobre la matrícula?"

SERVICES = "¡Con gusto te informo! 🎓 La Escuela Superior Vocacional Pablo Colón Berdecia ofrece estos servicios:<br><br>📚 <a href='matricula.html'>Matrícula Online</a>: Inscríbete fácilmente<br>📄 <a href='solicitudes.html'>Solicitud de Documentos</a>: Certificaciones, transcripciones<br>🔧 <a href='servicios-tecnicos.html'>Servicios Técnicos</a>: Soporte tecnológico<br>🏥 <a href='enfermeria.html'>Enfermería</a>: Atención médica básica<br>💬 <a href='orientacion.html'>Orientación</a>: Apoyo psicológico y académico<br>📖 <a href='biblioteca.html'>Biblioteca</a>: Préstamo de libros<br>🍽️ <a href='comedor.html'>Comedor</a>: Alimentación escolar<br>👨‍👩‍👧 <a href='padres.html'>Portal de Padres</a>: Comunicación familiar<br>🛡️ <a href='seguridad.html'>Seguridad</a>: Registro de visitantes<br>📊 <a href='evidencia.html'>Dashboard Evidencia</a>: Seguimiento académico<br>🏃 <a href='deportes.html'>Deportes</a>: Actividades físicas<br><br>¡Dime cuál te interesa y te ayudo! 😊"

REQUEST_STATUS = "Para consultar el estado de tu solicitud, te recomiendo visitar la sección donde la creaste o contactar directamente a la oficina administrativa 📞. ellos podrán darte información actualizada sobre tu caso. ¿Tienes el número de solicitud?"

PROCESSING_TIME = "El tiempo de procesamiento varía según el tipo de solicitud 📋. Generalmente:<br><br>• Documentos simples: 2-3 días hábiles<br>• Certificaciones: 3-5 días hábiles<br>• Matrículas: Depende del período<br><br>Te recomiendo presentar tu solicitud con anticipación. ¿Necesitas algo más?"

HELP = "¡Claro que sí! 😊 Estoy aquí para ayudarte. Puedo orientarte sobre:<br><br>✅ Procesos de matrícula y solicitudes<br>✅ Horarios de servicios (comedor, biblioteca, etc.)<br>✅ Información de contacto<br>✅ Navegación en el sistema<br>✅ Y cualquier otra duda sobre la escuela<br><br>¿Qué necesitas saber?"

CONFUSION = "¡No te preocupes! 😊 Estoy aquí para ayudarte. Trata de explicarme tu duda con tus propias palabras y con gusto te ayudo a encontrar lo que necesitas. También puedes preguntarme directamente por un servicio específico. ¿Qué necesitas?"

AFFIRMATIVE = (
    "¡Perfecto! 😊 ¿Hay algo más en lo que pueda ayudarte?",
    "¡Genial! 😄 ¿Tienes alguna otra pregunta?",
    "¡Excelente! 👍 ¿En qué más puedo asistirte?",
    "¡Qué bueno! 🎉 ¿Necesitas más información?",
)

NEGATIVE = (
    "¡De nada! 😊 ¡Que tengas un excelente día! Si necesitas algo más, aquí estaré.",
    "¡Para eso estoy! 🙌 ¡Que te vaya muy bien!",
    "¡Fue un placer ayudarte! 👋 ¡hasta pronto!",
)

SMALL_TALK = (
    "¡Estoy bien, gracias! ¿Cómo van tus clases hoy? ¿Necesitas ayuda con alguna materia?",
    "¡Todo en orden! ¿Tienes alguna duda sobre tareas, horarios o el calendario escolar?",
    "¡Listo para ayudar! ¿Hay alguna asignatura con la que quieras apoyo o información?",
    "¡Muy bien! ¿Te interesa revisar alguna tarea, evento escolar o recurso académico ahora?",
    "¡Bien, gracias! ¿Prefieres que te muestre recursos de estudio, el calendario o el menú del comedor?",
    "Me encuentro listo para asistirte. ¿Quieres ayuda con una tarea, preparar un examen o consultar una fecha importante?",
    "¡Todo tranquilo por aquí! ¿Estás buscando información sobre tus clases, el horario o alguna actividad escolar?",
    "Perfecto, gracias. ¿Te gustaría revisar las últimas novedades de la escuela o tus próximas evaluaciones?",
    "¡Listo para apoyar! ¿Necesitas consejos de estudio, material de apoyo o ayuda para contactar a un profesor?",
    "Muy bien, gracias. ¿Quieres que busque eventos en el calendario, horarios de la escuela o información de matrícula?",
    "Estoy bien, ¿prefieres un tono más formal o más informal en mis respuestas? Puedo adaptarme al estilo académico que prefieras.",
    "¡Gracias por preguntar! ¿Te gustaría que te recuerde tareas pendientes o eventos próximos del colegio?",
)

ASSISTANT_NAME = "Me llamo <strong>Asistente PCB</strong> 🤖, soy el asistente virtual de la Escuela Superior Vocacional Pablo Colón Berdecia. ¡Estoy para servirte! 😊"

WEATHER = "No tengo acceso a información del clima en tiempo real 🌤️, pero te recomiendo revisar una aplicación del clima para verificar las condiciones actuales. ¿Hay algo más en lo que pueda ayudarte con la escuela?"

CALENDAR = (
    "📅 <strong>Calendario Escolar 2025-2026 - Fechas Importantes:</strong><br><br>"
    "<strong>FEBRERO:</strong><br>"
    "• 13 de febrero: Reuniones profesionales de facultad y equipo para análisis de intervenciones a estudiantes (tarde)<br>"
    "• 16 de febrero: Día festivo según calendario escolar<br>"
    "• 19 de febrero: Assessment<br><br>"
    "<strong>MARZO:</strong><br>"
    "• 2 de marzo: Día festivo<br>"
    "• 16 de marzo: Assessment<br>"
    "• 20 de marzo: Reuniones profesionales (tarde)<br>"
    "• 23 de marzo: Día festivo<br>"
    "• 27 de marzo: Entrega del informe de progreso académico<br><br>"
    "<strong>ABRIL:</strong><br>"
    "• 2 de abril: Receso académico (personal docente y no docente)<br>"
    "• 3 de abril: Feriado<br>"
    "• Del 13 de abril al 7 de mayo: Assessment<br><br>"
    "<strong>MAYO:</strong><br>"
    "• Del 18 al 22 de mayo: Semana de la Educación<br>"
    "• 22 de mayo: Receso académico<br>"
    "• 25 de mayo: Feriado<br>"
    "• 26 y 27 de mayo: Evaluaciones finales<br>"
    "• 29 de mayo: Entrega del informe de progreso académico<br><br>"
    "¿Necesitas información más específica sobre alguna fecha? 😊"
)

ASSESSMENTS = (
    "📝 <strong>Información sobre Assessments:</strong><br><br>"
    "<strong>FEBRERO:</strong><br>"
    "• 19 de febrero: Assessment<br><br>"
    "<strong>MARZO:</strong><br>"
    "• 16 de marzo: Assessment<br><br>"
    "<strong>ABRIL - MAYO:</strong><br>"
    "• Del 13 de abril al 7 de mayo: Assessment (período completo)<br><br>"
    "Los assessments son evaluaciones importantes para medir el progreso académico. ¿Tienes alguna pregunta específica sobre los horarios o preparación? 😊"
)

HOLIDAYS = (
    "🎉 <strong>Días Festivos y Feriados 2025-2026:</strong><br><br>"
    "<strong>FEBRERO:</strong><br>"
    "• 16 de febrero: Día festivo<br><br>"
    "<strong>MARZO:</strong><br>"
    "• 2 de marzo: Día festivo<br>"
    "• 23 de marzo: Día festivo<br><br>"
    "<strong>ABRIL:</strong><br>"
    "• 3 de abril: Feriado<br><br>"
    "<strong>MAYO:</strong><br>"
    "• 25 de mayo: Feriado<br><br>"
    "¡Estos son los días donde no hay clases! ¿Necesitas más información? 😊"
)

RECESS = (
    "🌴 <strong>Recesos Académicos 2025-2026:</strong><br><br>"
    "<strong>ABRIL:</strong><br>"
    "• 2 de abril: Receso académico (personal docente y no docente)<br>"
    "• 3 de abril: Feriado<br><br>"
    "<strong>MAYO:</strong><br>"
    "• 22 de mayo: Receso académico (personal docente y no docente)<br><br>"
    "¿Necesitas información sobre otros períodos o eventos escolares? 😊"
)

PROGRESS_REPORTS = (
    "📊 <strong>Entrega de Informes de Progreso Académico:</strong><br><br>"
    "• <strong>27 de marzo:</strong> Entrega del informe de progreso académico en la escuela<br>"
    "• <strong>29 de mayo:</strong> Entrega del informe de progreso académico en la escuela<br><br>"
    "Estos informes muestran el progreso académico de los estudiantes. ¿Tienes alguna pregunta sobre cómo acceder a ellos o sobre el sistema de evaluación? 😊"
)

EDUCATION_WEEK = (
    "🎓 <strong>Semana de la Educación:</strong><br><br>"
    "• <strong>Del 18 al 22 de mayo:</strong> Semana de la Educación<br>"
    "• <strong>22 de mayo:</strong> Receso académico (docente y no docente)<br><br>"
    "Es una semana especial dedicada a actividades educativas y celebraciones. ¿Te gustaría saber más sobre las actividades planificadas? 😊"
)

FINALS = (
    "📚 <strong>Evaluaciones Finales 2025-2026:</strong><br><br>"
    "• <strong>26 y 27 de mayo:</strong> Evaluaciones finales<br><br>"
    "Las evaluaciones finales son exámenes que se realizan al final del año académico para evaluar el aprendizaje. ¿Necesitas información sobre el contenido o cómo prepararte? 😊"
)

FEBRUARY_EVENTS = (
    "📅 <strong>Eventos de Febrero 2026:</strong><br><br>"
    "• 13 de febrero: Reuniones profesionales de facultad y equipo (tarde)<br>"
    "• 16 de febrero: Día festivo<br>"
    "• 19 de febrero: Assessment<br><br>"
    "¿Necesitas más información sobre alguno de estos eventos? 😊"
)

MARCH_EVENTS = (
    "📅 <strong>Eventos de Marzo 2026:</strong><br><br>"
    "• 2 de marzo: Día festivo<br>"
    "• 16 de marzo: Assessment<br>"
    "• 20 de marzo: Reuniones profesionales (tarde)<br>"
    "• 23 de marzo: Día festivo<br>"
    "• 27 de marzo: Entrega del informe de progreso académico<br><br>"
    "¿Necesitas más información sobre alguno de estos eventos? 😊"
)

APRIL_EVENTS = (
    "📅 <strong>Eventos de Abril 2026:</strong><br><br>"
    "• 2 de abril: Receso académico<br>"
    "• 3 de abril: Feriado<br>"
    "• Del 13 de abril al 7 de mayo: Assessment<br><br>"
    "¿Necesitas más información sobre alguno de estos eventos? 😊"
)

MAY_EVENTS = (
    "📅 <strong>Eventos de Mayo 2026:</strong><br><br>"
    "• Del 13 de abril al 7 de mayo: Assessment (continúa)<br>"
    "• Del 18 al 22 de mayo: Semana de la Educación<br>"
    "• 22 de mayo: Receso académico<br>"
    "• 25 de mayo: Feriado<br>"
    "• 26 y 27 de mayo: Evaluaciones finales<br>"
    "• 29 de mayo: Entrega del informe de progreso académico<br><br>"
    "¿Necesitas más información sobre alguno de estos eventos? 😊"
)

FALLBACK = "Lo siento to tengo una contestacion a eso, todavia soy una ia en desarrollo."
