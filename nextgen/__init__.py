"""NextGen Minds: match students to jobs by skill overlap and surface skill gaps."""
