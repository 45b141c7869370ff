"""pygame front end: drawing, sounds, input and the frame loop."""
