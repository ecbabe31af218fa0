"""Services metier : analyse des chemins, rapprochement catalogue, organisation."""
