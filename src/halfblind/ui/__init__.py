"""Qt user interface — a secondary board view showing the shadow board."""
